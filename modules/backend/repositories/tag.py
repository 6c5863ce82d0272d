"""
Tag Repository.
"""

from modules.backend.models.tag import Tag
from modules.backend.repositories.base import BaseRepository


class TagRepository(BaseRepository[Tag]):
    model = Tag
    default_order = (Tag.name.asc(),)
