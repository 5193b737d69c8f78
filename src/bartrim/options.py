class RenderOptions:
    """Rendering settings for linear barcode images

    Every option has a class level default, instances override them
    by keyword. Values are not range checked, odd values give odd
    (possibly empty) images.
    """
    module_width = 2        # pixels per module
    height = 60             # image height in pixels, caption included
    quiet_zone = 10         # blank modules on each side
    background = "#ffffff"
    bar_color = "#000000"
    display_value = False   # render text under bars
    font_family = "monospace"
    font_size = 14
    text_margin = 4         # pixels between bars and text
    # empirical text baseline offset as a fraction of font size
    baseline_ratio = 0.8

    _names = (
        "module_width", "height", "quiet_zone", "background", "bar_color",
        "display_value", "font_family", "font_size", "text_margin",
        "baseline_ratio",
    )

    def __init__(self, **options):
        for name, value in options.items():
            if name not in self._names:
                raise TypeError("Unknown render option {!r}".format(name))
            setattr(self, name, value)

    def replace(self, **options):
        """Copy of options with some values changed"""
        values = self.as_dict()
        values.update(options)
        return type(self)(**values)

    def as_dict(self):
        return {name: getattr(self, name) for name in self._names}

    @property
    def bars_height(self):
        """Height of bars, leaving room for caption if displayed"""
        if self.display_value:
            return max(0, self.height - self.font_size - self.text_margin)
        return self.height

    def __repr__(self):
        return "{}({})".format(
            type(self).__name__,
            ", ".join(
                "{}={!r}".format(name, value)
                for name, value in self.as_dict().items()
            )
        )
