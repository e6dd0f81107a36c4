import logging
import sys

logger = logging.getLogger("interlace")


def setup_logging(should_debug: bool = False) -> None:
    """Attach a stream handler to the ``interlace`` logger.

    Calling it more than once only updates the level.
    """
    level = logging.DEBUG if should_debug else logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_interlace_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._interlace_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
