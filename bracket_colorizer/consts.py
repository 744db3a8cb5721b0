PACKAGE_NAME = 'BracketColorizer'
SETTINGS_FILE = f'{PACKAGE_NAME}.json'

DEFAULT_COLOR_COUNT = 6
DEFAULT_COLORS = (
    '#FF6A00',
    '#FFD800',
    '#00FF00',
    '#0094FF',
    '#0041FF',
    '#7D00E5',
)
DEFAULT_ERROR_COLOR = '#FF0000'
