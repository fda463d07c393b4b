"""
Knowledge base module for the FAQ Router Bot
Contains the entry model, the keyword matcher and the category index
"""

from .entry import Entry
from .knowledge_base import KnowledgeBase, KnowledgeBaseError, load_knowledge_base
from .matcher import ScoredMatch, score_entry, rank_entries, search
from .category_index import CategoryIndex

__all__ = [
    'Entry',
    'KnowledgeBase',
    'KnowledgeBaseError',
    'load_knowledge_base',
    'ScoredMatch',
    'score_entry',
    'rank_entries',
    'search',
    'CategoryIndex'
]
