# socialnet/api/__init__.py
