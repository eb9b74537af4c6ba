from objkit.shapes.rectangle import Rectangle, make_rectangle

__all__ = ["Rectangle", "make_rectangle"]
