from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Optional

import ipywidgets as w
import matplotlib.pyplot as plt

from blade_harmonics.analysis.identities import THEORY_HTML, check_identities
from blade_harmonics.analysis.sampler import generate_from_params
from blade_harmonics.gui.log_view import HtmlLog
from blade_harmonics.gui.plots import plot_dataset, tooltip_text
from blade_harmonics.models.params import (
    BLADE_COUNT_RANGE,
    PHASE_SHIFT_RANGE,
    PHASE_SHIFT_STEP,
    RESOLUTION_RANGE,
    RESOLUTION_STEP,
    HarmonicsParams,
)
from blade_harmonics.models.samples import HarmonicsDataset


SINE_TITLE = "sin(θ + Δψ + 2πb/B) - Individual Blades and Sum"
SQUARED_TITLE = "sin²(θ + Δψ + 2πb/B) - Individual Blades and Sum"

# Keep a single active GUI instance per kernel to avoid duplicated callbacks / stacked widgets.
_ACTIVE_GUI: Optional[w.Widget] = None


@dataclass
class VisualizerState:
    """Current parameters and the last computed datasets (owned by the GUI, not the sampler)."""

    params: HarmonicsParams = field(default_factory=HarmonicsParams)
    sine: Optional[HarmonicsDataset] = None
    squared: Optional[HarmonicsDataset] = None
    fig: object | None = None
    log: Optional[HtmlLog] = None
    n_redraws: int = 0


def hover_readout_html(sine: Optional[HarmonicsDataset], squared: Optional[HarmonicsDataset], theta: float) -> str:
    """Side-by-side tooltip text for both charts at angle ``theta``."""
    cols = []
    for name, ds in (("sin", sine), ("sin²", squared)):
        if ds is None:
            continue
        txt = tooltip_text(ds, theta)
        if txt:
            cols.append(
                f"<div style='margin-right:24px;'><b>{html.escape(name)}</b>"
                f"<pre style='margin:0;'>{html.escape(txt)}</pre></div>"
            )
    if not cols:
        return ""
    return "<div style='display:flex;'>" + "".join(cols) + "</div>"


def build_visualizer_panel(state: Optional[VisualizerState] = None) -> w.Widget:
    """
    Blade harmonics panel: parameter controls, the two charts, theory box and log.

    state: optional VisualizerState updated in place on every recompute
      (lets a caller or a test observe the datasets currently displayed).
    """
    if state is None:
        state = VisualizerState()
    p0 = state.params.clamped_to_ui()
    state.params = p0

    log = HtmlLog(title="Log", height_px=140)
    state.log = log
    status = w.HTML("<b>Status:</b> idle")
    hover = w.HTML("")

    def _set_status(s: str) -> None:
        status.value = f"<b>Status:</b> {s}"

    # -----------------------
    # Widgets (controls)
    # -----------------------
    style = {"description_width": "initial"}

    sl_blades = w.IntSlider(
        value=p0.blade_count,
        min=BLADE_COUNT_RANGE[0],
        max=BLADE_COUNT_RANGE[1],
        step=1,
        description="Number of Blades (B):",
        style=style,
        layout=w.Layout(width="420px"),
    )
    sl_phase = w.FloatSlider(
        value=p0.phase_shift,
        min=PHASE_SHIFT_RANGE[0],
        max=PHASE_SHIFT_RANGE[1],
        step=PHASE_SHIFT_STEP,
        readout_format=".2f",
        description="Phase Shift (Δψ):",
        style=style,
        layout=w.Layout(width="420px"),
    )
    sl_resolution = w.IntSlider(
        value=p0.resolution,
        min=RESOLUTION_RANGE[0],
        max=RESOLUTION_RANGE[1],
        step=RESOLUTION_STEP,
        description="Resolution:",
        style=style,
        layout=w.Layout(width="420px"),
    )
    cb_subtract_mean = w.Checkbox(value=p0.subtract_mean, description="Subtract mean", indent=False)

    out_plot = w.Output(layout=w.Layout(border="1px solid #ddd", padding="6px"))

    # -----------------------
    # Recompute + redraw
    # -----------------------

    def _on_motion(event) -> None:
        if event.inaxes is None or event.xdata is None:
            hover.value = ""
            return
        hover.value = hover_readout_html(state.sine, state.squared, event.xdata)

    def _redraw() -> None:
        params = HarmonicsParams(
            blade_count=int(sl_blades.value),
            phase_shift=float(sl_phase.value),
            resolution=int(sl_resolution.value),
            subtract_mean=bool(cb_subtract_mean.value),
        )
        _set_status("computing…")
        try:
            sine, squared = generate_from_params(params)
            state.params = params
            state.sine = sine
            state.squared = squared

            if state.fig is not None:
                plt.close(state.fig)
                state.fig = None

            out_plot.clear_output(wait=True)
            with out_plot:
                fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10.0, 8.0))
                plot_dataset(ax1, sine, title=SINE_TITLE, ylabel="sin(θ + Δψ + 2πb/B)")
                plot_dataset(ax2, squared, title=SQUARED_TITLE, ylabel="sin²(θ + Δψ + 2πb/B)")
                fig.tight_layout()
                fig.canvas.mpl_connect("motion_notify_event", _on_motion)
                plt.show()
                state.fig = fig

            state.n_redraws += 1
            hover.value = ""
            report = check_identities(sine, squared)
            log.info(
                f"B={params.blade_count}, Δψ={params.phase_shift:.2f}, N={params.resolution}, "
                f"subtract_mean={params.subtract_mean}"
            )
            log.info(report.summary())
        except Exception as exc:
            log.error(f"ERROR: {exc}")
        finally:
            _set_status("idle")

    def _on_change(_change) -> None:
        _redraw()

    for ctl in (sl_blades, sl_phase, sl_resolution, cb_subtract_mean):
        ctl.observe(_on_change, names="value")

    # Initial drawing
    _redraw()

    # -----------------------
    # Layout
    # -----------------------

    header = w.HTML("<h2>🌀 Blade Harmonics Visualizer</h2>")
    controls = w.VBox([sl_blades, sl_phase, sl_resolution, cb_subtract_mean])
    theory = w.HTML(
        f"<div style='border:1px solid #ddd; padding:8px; background:#fafafa;'>{THEORY_HTML}</div>"
    )

    left = w.VBox([header, controls, out_plot, hover, theory], layout=w.Layout(width="70%"))
    right = w.VBox([status, log.panel], layout=w.Layout(width="30%"))
    return w.HBox([left, right], layout=w.Layout(width="100%"))


def build_gui(params: Optional[HarmonicsParams] = None) -> w.Widget:
    """
    Build the visualizer for a Jupyter / VSCode notebook:

        from blade_harmonics.gui.app import build_gui
        build_gui()

    Re-running the cell closes the previous instance created from this module.
    """
    global _ACTIVE_GUI

    if _ACTIVE_GUI is not None:
        try:
            _ACTIVE_GUI.close()
        except Exception:
            pass
        _ACTIVE_GUI = None

    state = VisualizerState(params=params if params is not None else HarmonicsParams())
    gui = build_visualizer_panel(state)
    _ACTIVE_GUI = gui
    return gui
