import pystray
from PIL import Image, ImageDraw

from raidip_config import APP_NAME, IP_UNKNOWN_TEXT
from log_utils import log_action


def make_icon_image(size=64):
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    pad = size // 8
    draw.ellipse([pad, pad, size - pad, size - pad], fill="#2e7d32", outline="white", width=max(1, size // 16))
    # Meridian and equator
    mid = size // 2
    draw.line([mid, pad, mid, size - pad], fill="white", width=max(1, size // 32))
    draw.line([pad, mid, size - pad, mid], fill="white", width=max(1, size // 32))
    return image


class TrayIcon:
    """
    System tray surface: a tooltip, a title line shown at the top of the menu,
    and the "Show IP & Country" / "Quit" actions.
    """

    def __init__(self, name=APP_NAME):
        self.name = name
        self.title = IP_UNKNOWN_TEXT
        self.tooltip = name
        self.icon = None

    def set_title(self, text):
        self.title = text
        if self.icon is not None:
            self.icon.update_menu()

    def set_tooltip(self, text):
        self.tooltip = text
        if self.icon is not None:
            self.icon.title = text

    def build_menu(self, on_show, on_quit):
        return pystray.Menu(
            pystray.MenuItem(lambda item: self.title, None, enabled=False),
            pystray.Menu.SEPARATOR,
            pystray.MenuItem("Show IP & Country", lambda icon, item: on_show()),
            pystray.MenuItem("Quit", lambda icon, item: on_quit()),
        )

    def run(self, on_ready, on_show, on_quit):
        """Blocks until stop() is called. on_ready runs once the icon is up."""
        self.icon = pystray.Icon(
            self.name,
            make_icon_image(),
            self.tooltip,
            menu=self.build_menu(on_show, on_quit),
        )

        def setup(icon):
            icon.visible = True
            log_action("System tray setup complete")
            on_ready()

        self.icon.run(setup=setup)

    def stop(self):
        if self.icon is not None:
            self.icon.stop()
