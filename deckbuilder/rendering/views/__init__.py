"""
One module per view mode. Each exposes

    render(surface, config, width, height, camera=None)

and draws the whole view into the surface without touching anything else.
"""
