"""Colors and geometry of the browser window."""

WHITE = 0xFFFFFF
LIGHTGREY = 0xD3D3D3
GREY = 0x808080
DARKGREY = 0x5A5A5A
BLACK = 0x000000

ADDRESSBAR_HEIGHT = 20

WINDOW_INIT_X_POS = 30
WINDOW_INIT_Y_POS = 50

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 400
WINDOW_PADDING = 5

TITLE_BAR_HEIGHT = 24

TOOLBAR_HEIGHT = 26

CONTENT_AREA_WIDTH = WINDOW_WIDTH - WINDOW_PADDING * 2
CONTENT_AREA_HEIGHT = WINDOW_HEIGHT - TITLE_BAR_HEIGHT - TOOLBAR_HEIGHT - WINDOW_PADDING * 2

CHAR_WIDTH = 8
CHAR_HEIGHT = 16
CHAR_HEIGHT_WITH_PADDING = CHAR_HEIGHT + 4