"""
mdlinks - extract hyperlinks from markdown documents
"""
from .models import LinkRecord
from .markdown_tree import accumulate_text, iter_nodes, parse_markdown
from .link_extractor import (
    LinkExtractor,
    LinkSourceError,
    extract_links,
    extract_links_from_file,
    extract_links_from_files,
)
from .serializers import SerializationError, to_delimited, to_json, write_records
from .config import Config, get_config

__all__ = [
    'LinkRecord',
    'accumulate_text',
    'iter_nodes',
    'parse_markdown',
    'LinkExtractor',
    'LinkSourceError',
    'extract_links',
    'extract_links_from_file',
    'extract_links_from_files',
    'SerializationError',
    'to_delimited',
    'to_json',
    'write_records',
    'Config',
    'get_config',
]
