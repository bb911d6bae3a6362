import os

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_TEMPLATE_DIR = os.path.join(ROOT_DIR, 'config')
CONFIG_DIR = os.getenv('WAVEFORM_PATH_CONFIG_DIR', CONFIG_TEMPLATE_DIR)

WINDOWS_LOG_CONFIG_FILE = os.path.join(CONFIG_DIR, 'logging_windows.yaml')
LINUX_LOG_CONFIG_FILE = os.path.join(CONFIG_DIR, 'logging_linux.yaml')
HYPERPARAMETER_CONFIG_FILE = os.path.join(CONFIG_DIR, 'hyperparameter.yaml')
SETTINGS_CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.yaml')
