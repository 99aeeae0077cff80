"""
The MODEL layer contains pure data structures and array logic.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with loading, slicing, normalization and colors.
"""
