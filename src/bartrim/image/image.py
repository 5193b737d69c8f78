from abc import ABC, abstractmethod

from ..options import RenderOptions


class BarcodeImage(ABC):
    file_open_mode = "w"

    """Abstract class representing image of a linear barcode

    Barcode can optionally contain a caption, usually containing
    the same information as the barcode.
    """
    def __init__(self, modules, options=None, text=None):
        self.modules = list(modules)
        self.options = options or RenderOptions()
        self.text = text

    @property
    def total_modules(self):
        """Width of bars and both quiet zones in modules"""
        return sum(self.modules) + 2 * self.options.quiet_zone

    @property
    def image_width(self):
        """Total image width in pixels"""
        return self.total_modules * self.options.module_width

    @property
    def image_height(self):
        """Total image height in pixels"""
        return self.options.height

    @property
    def show_text(self):
        return self.options.display_value and self.text is not None

    def bar_runs(self):
        """Yields (x, width) in pixels of every bar, left to right"""
        module_width = self.options.module_width
        x = self.options.quiet_zone * module_width
        is_bar = True
        for width in self.modules:
            width_px = width * module_width
            if is_bar:
                yield x, width_px
            x += width_px
            is_bar = not is_bar

    @abstractmethod
    def _write_header(self, image_file):
        pass

    @abstractmethod
    def _write_bars(self, image_file):
        pass

    @abstractmethod
    def _write_text_area(self, image_file):
        pass

    @abstractmethod
    def _write_finish(self, image_file):
        pass

    def write(self, image_file):
        self._write_header(image_file)
        self._write_bars(image_file)
        if self.show_text:
            self._write_text_area(image_file)
        self._write_finish(image_file)
