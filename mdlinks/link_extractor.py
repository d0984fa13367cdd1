"""
Link extraction from markdown documents.

The markdown source is parsed into a document tree and every link node found
in a pre-order walk becomes one ``LinkRecord``. Nothing is pattern-matched
outside of what the parser recognised as a link.
"""
from pathlib import Path
from collections.abc import Iterable

from .logging_config import get_logger
from .markdown_tree import accumulate_text, is_link_node, iter_nodes, parse_markdown
from .models import LinkRecord

logger = get_logger("link_extractor")

PathLike = str | Path


class LinkSourceError(Exception):
    """Raised when a markdown source file cannot be read or decoded."""

    def __init__(self, path: PathLike, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error reading {self.path}: {reason}")


class LinkExtractor:
    """Extract hyperlinks from markdown text and files."""

    @classmethod
    def extract_links(cls, markdown_text: str, source_file: str) -> list[LinkRecord]:
        """
        Extract all links from markdown text.

        Args:
            markdown_text: Markdown source to scan
            source_file: Identifier stored verbatim on every record

        Returns:
            Records in document order, one per link node
        """
        root = parse_markdown(markdown_text)
        return [
            LinkRecord(
                description=accumulate_text(node),
                url=node.get("attrs", {}).get("url", ""),
                source_file=source_file,
            )
            for node in iter_nodes(root)
            if is_link_node(node)
        ]

    @staticmethod
    def load_file(filepath: PathLike) -> str:
        """
        Read a markdown file as UTF-8 text.

        Raises:
            LinkSourceError: If the file cannot be opened or decoded
        """
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LinkSourceError(filepath, str(e)) from e

    @classmethod
    def extract_links_from_file(cls, filepath: PathLike) -> list[LinkRecord]:
        """
        Extract all links from a markdown file.

        The file path, as given, is used as the source identifier.

        Raises:
            LinkSourceError: If the file cannot be read
        """
        logger.debug("Extracting links from %s", filepath)
        content = cls.load_file(filepath)
        links = cls.extract_links(content, str(filepath))
        logger.info("Found %d links in %s", len(links), filepath)
        return links

    @classmethod
    def extract_links_from_files(cls, filepaths: Iterable[PathLike]) -> list[LinkRecord]:
        """
        Extract links from several files, skipping the ones that fail.

        Args:
            filepaths: Files to process, in output order

        Returns:
            Records of all readable files, concatenated in input order
        """
        records: list[LinkRecord] = []
        for filepath in filepaths:
            try:
                records.extend(cls.extract_links_from_file(filepath))
            except LinkSourceError as e:
                logger.warning("Skipping %s: %s", e.path, e.reason)
        return records


def extract_links(markdown_text: str, source_file: str) -> list[LinkRecord]:
    """Extract links from markdown text. Wraps LinkExtractor.extract_links."""
    return LinkExtractor.extract_links(markdown_text, source_file)


def extract_links_from_file(filepath: PathLike) -> list[LinkRecord]:
    """
    Extract all links from a markdown file.

    This is a convenience function that wraps LinkExtractor.extract_links_from_file.
    """
    return LinkExtractor.extract_links_from_file(filepath)


def extract_links_from_files(filepaths: Iterable[PathLike]) -> list[LinkRecord]:
    """Extract links from several files. Wraps LinkExtractor.extract_links_from_files."""
    return LinkExtractor.extract_links_from_files(filepaths)
