# socialnet/models/__init__.py
from .post import Post
from .comment import Comment
from .like import Like

__all__ = ['Post', 'Comment', 'Like']
