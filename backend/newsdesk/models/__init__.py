from .user import User
from .newspaper import Newspaper
from .article import Article
from .news_list import NewsList

__all__ = [
    "User",
    "Newspaper",
    "Article",
    "NewsList",
]
