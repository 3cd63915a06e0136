"""Preprocessor orchestration: envelope in, stripped book out"""

from fmstrip.core.book import strip_book
from fmstrip.core.envelope import decode_envelope, encode_book
from fmstrip.util.logging import get_logger


logger = get_logger(__name__)


def supports_renderer(renderer: str, renderers: list[str]) -> bool:
    """Return True if renderer is one of the configured supported renderers."""
    return renderer in renderers


def run_preprocess(raw: str) -> str:
    """Strip frontmatter from every chapter in the envelope's book and return the book JSON.

    Raises EnvelopeError if raw is not a well-formed [context, book] envelope.
    """
    context, book = decode_envelope(raw)
    logger.info("Preprocessing for renderer %r (mdbook %s)", context.renderer, context.mdbook_version)
    report = strip_book(book)
    logger.info("Stripped frontmatter from %d of %d chapter(s)", report.stripped, report.chapters)
    return encode_book(book)
