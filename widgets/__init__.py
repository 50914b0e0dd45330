"""wxPython views for the companion application."""
