"""
Toolkit-independent rendering pipeline.

Everything here works on plain numbers and ``Color`` tuples so the
encoding rules can be tested without a display; the Qt widget only
paints what these modules compute.
"""
