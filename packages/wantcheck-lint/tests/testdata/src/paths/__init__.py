import os
from pathlib import Path

HERE = Path(__file__)  # want "avoid using Path\\(__file__\\)$"
DATA = os.path.dirname(__file__)  # want "os\\.path\\.dirname"
CONFIG = os.path.join("conf", __file__)  # want "WC002 avoid using os\\.path\\.join"
NAME = os.path.basename("conf.yaml")
OTHER = Path("conf.yaml")
