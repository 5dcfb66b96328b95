import logging
from typing import Optional


def error_message(expression: str, location: Optional[int], message: str) -> str:
    if location is None:
        return f"{expression}\n{message}\n"
    messages = [f"{expression}\n", f"{' ' * location}^ {message}\n"]
    return "".join(messages)


def setup_logging(trace: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if trace else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
