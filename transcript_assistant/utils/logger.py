import os
import sys
import logging

from transcript_assistant.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(str(config.BASE_DIR), "logs")
loging_path = os.path.join(logging_dir, "transcriptassistant.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)
logging.basicConfig(
    level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
    format=logging_str,
    handlers=[
        logging.FileHandler(loging_path, encoding="utf-8"),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('transcriptassistant')
