"""GUI package - interactive ipywidgets interface.

One panel with:
1. Controls: blade count, phase shift, resolution sliders and a subtract-mean checkbox
2. Charts: sin and sin² of every blade plus their sum, redrawn on each change
3. Theory box explaining the two identities
4. Log: parameters and identity residuals of every recompute

Entry point:
    from blade_harmonics.gui.app import build_gui
    gui = build_gui()
"""
