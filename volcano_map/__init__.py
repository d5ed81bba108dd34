"""
Volcano Map — interactive world volcano atlas.

Entry point: python -m volcano_map.gui.main

Provides:
- CSV dataset loading (ingest)
- Normalization ranges and geographic projection (geo)
- Visual encoding, hit testing and legend/tooltip layout (render)
- PyQt5 map widget and application window (gui)
"""
