# socialnet/api/posts/__init__.py
