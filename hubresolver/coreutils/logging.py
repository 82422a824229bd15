import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(
    level=logging.INFO, log_dir: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Setup basic logging configuration

    Logs go to stderr; when log_dir is given they are also written to a
    dated file inside it.
    """
    handlers = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                log_dir / f"hubresolver_{datetime.now().strftime('%Y-%m-%d')}.log"
            )
        )

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return logging.getLogger(__name__)
