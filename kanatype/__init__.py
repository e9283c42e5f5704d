import os

from dotenv import load_dotenv

load_dotenv()

# Get the base directory of the package (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Bundled data lives inside the package so it ships with the wheel
DATA_DIR = os.path.join(BASE_DIR, 'data')

ROMANIZATION_TABLE_PATH = os.getenv(
    'KANATYPE_ROMANIZATION_TABLE',
    os.path.join(DATA_DIR, 'romanization.json'),
)
SETS_DIR = os.getenv('KANATYPE_SETS_DIR', os.path.join(DATA_DIR, 'sets'))

DEFAULT_SET_ID = os.getenv('KANATYPE_DEFAULT_SET', 'n5')

# Raw buffers are capped at len(target reading) * this factor
MAX_INPUT_FACTOR = int(os.getenv('KANATYPE_MAX_INPUT_FACTOR', '4'))
