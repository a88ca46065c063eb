"""munsell_model.core — Foundation layer.

Contains the colour types, the colour-spec parser, presets, the degree scale and
hue-circle geometry. Only stdlib and numpy are allowed here; numpy is used
by circle.py alone.
"""
