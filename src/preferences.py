# Pendraw
# Copyright 2025 - Ricardo Quesada
import logging

from PySide6.QtCore import QObject, QSettings, Signal

logger = logging.getLogger(__name__)


class Preferences(QObject):
    default_font_family_changed = Signal(str)
    pixel_art_changed = Signal(bool)
    background_color_changed = Signal(str)

    def __init__(self):
        super().__init__()
        self._settings = QSettings()

    def get_default_font_family(self) -> str:
        return str(self._settings.value("text/default_font_family", defaultValue="Arial"))

    def set_default_font_family(self, family: str) -> None:
        current = self.get_default_font_family()
        if current != family:
            self._settings.setValue("text/default_font_family", family)
            self.default_font_family_changed.emit(family)

    def get_pixel_art(self) -> bool:
        # QSettings may hand back "true"/"false" strings from ini backends
        value = self._settings.value("surface/pixel_art", defaultValue=False)
        if isinstance(value, str):
            return value.lower() == "true"
        return bool(value)

    def set_pixel_art(self, enabled: bool) -> None:
        current = self.get_pixel_art()
        if current != enabled:
            self._settings.setValue("surface/pixel_art", enabled)
            self.pixel_art_changed.emit(enabled)

    def get_background_color_name(self) -> str:
        return str(self._settings.value("surface/background_color", defaultValue="transparent"))

    def set_background_color_name(self, color: str) -> None:
        current = self.get_background_color_name()
        if current != color:
            self._settings.setValue("surface/background_color", color)
            self.background_color_changed.emit(color)


_global_preferences = None


# Singleton
def get_global_preferences() -> Preferences:
    # Using a function to return the global instance so that we can delay
    # the creation of QSettings() after QCoreApplication.setOrganizationName() is called
    global _global_preferences
    if _global_preferences is None:
        _global_preferences = Preferences()
        logger.debug("Created global preferences")
    return _global_preferences
