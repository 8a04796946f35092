import inspect
import logging.handlers
import os
from pathlib import Path

PACKAGE_DIR = "valorant_api" + os.sep


class ClassNameFilter(logging.Filter):
    def filter(self, record):
        rel_path = os.path.relpath(os.path.abspath(record.pathname), os.getcwd())
        package_index = rel_path.find(PACKAGE_DIR)
        if package_index != -1:
            rel_path = rel_path[package_index + len(PACKAGE_DIR):]
        if rel_path.endswith(".py"):
            rel_path = rel_path[:-3]
        record.relpath = rel_path.replace(os.sep, ".").replace("\\", ".")

        record.classname = ""
        frame = inspect.currentframe()
        while frame:
            code = frame.f_code
            if code.co_name == record.funcName:
                self_obj = frame.f_locals.get("self")
                if self_obj:
                    record.classname = self_obj.__class__.__name__
                    break
            frame = frame.f_back
        return True


class SmartClassFormatter(logging.Formatter):
    def format(self, record):
        # module-level functions have no class
        if not getattr(record, "classname", ""):
            record.classname = "<module>"
        return super().format(record)


fmt = "%(asctime)s - [%(levelname)s] - %(relpath)s.%(classname)s.%(funcName)s(): %(message)s {%(lineno)d}"
formatter = SmartClassFormatter(fmt)

console = logging.StreamHandler()
console.setFormatter(formatter)

logger = logging.getLogger("ValorantApi")
logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
logger.addFilter(ClassNameFilter())
logger.addHandler(console)
logger.propagate = False

LOG_DIR = os.getenv("LOG_DIR")
if LOG_DIR:
    log_file = Path(LOG_DIR) / "valorant_api.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        log_file, when="midnight", interval=1, backupCount=5, encoding="utf-8"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
