# socialnet/core/__init__.py
