# utils.py
import os
import json
import logging

from dotenv import load_dotenv

from discovery.catalogs import DiscoveryConfig
from discovery.utils import USER_AGENT

load_dotenv()

DEFAULT_CONFIG = {
    "database_file": "discovery.db",
    "export_directory": "exports",
    "log_directory": "logs",
    "cors_origins": [],
    "user_agent": USER_AGENT,
    "discovery": {},
}

# --- Configuration Loading ---
def load_config(config_file=None):
    """Reads config.json over the built-in defaults. A missing file is not an error."""
    config_file = config_file or os.getenv("PAGESCOUT_CONFIG", "config.json")
    merged = dict(DEFAULT_CONFIG)
    if os.path.exists(config_file):
        with open(config_file, 'r') as f:
            merged.update(json.load(f))
    else:
        logging.warning(f"Config file {config_file} not found, using defaults.")
    return merged

config = load_config()

EXPORT_DIRECTORY = config['export_directory']
LOG_DIRECTORY = config['log_directory']

os.makedirs(EXPORT_DIRECTORY, exist_ok=True)
os.makedirs(LOG_DIRECTORY, exist_ok=True)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(), logging.FileHandler(os.path.join(LOG_DIRECTORY, 'discovery.log'))],
)


def discovery_config(cfg=None) -> DiscoveryConfig:
    cfg = cfg if cfg is not None else config
    section = dict(cfg.get("discovery") or {})
    section.setdefault("user_agent", cfg.get("user_agent", USER_AGENT))
    return DiscoveryConfig.from_mapping(section)
