import logging
from pathlib import Path
from typing import Optional
from configuration import Configuration as Config

p = Path(__file__).resolve()

# Create a custom logger
formula_gen_logger = logging.getLogger("formula_gen")
formula_gen_logger.setLevel(logging.DEBUG)  # Set the minimum logging level

# Create a logging format
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# Console handler is always on
console_handler = logging.StreamHandler()
console_handler.setLevel(logging.DEBUG if Config.debug else logging.INFO)
console_handler.setFormatter(formatter)
formula_gen_logger.addHandler(console_handler)

# File handler is only attached for runs that write files (not dry runs or --help)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging() -> Path:
    global file_handler
    disable_file_logging()

    Config.log_dir.mkdir(parents=True, exist_ok=True)
    file_handler_path = Path(Config.log_dir, Config.log_file_name)
    file_handler = logging.FileHandler(file_handler_path, mode='w', encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    formula_gen_logger.addHandler(file_handler)
    return file_handler_path


def disable_file_logging() -> None:
    global file_handler
    if file_handler is None:
        return
    formula_gen_logger.removeHandler(file_handler)
    file_handler.close()
    file_handler = None
