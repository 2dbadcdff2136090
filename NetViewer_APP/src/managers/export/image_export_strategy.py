from .export_strategy import ExportStrategy

class ImageExportStrategy(ExportStrategy):
    """Base for raster snapshots of the layout."""

    def fit(self, points, size, padding):
        """
        Return a function mapping layout coordinates into a `size` pixel box
        with `padding`, keeping the aspect ratio.
        """
        width, height = size
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        x_min, y_min = min(xs), min(ys)
        x_range = max(xs) - x_min
        y_range = max(ys) - y_min
        avail_w = width - 2 * padding
        avail_h = height - 2 * padding
        scales = [s for s in (avail_w / x_range if x_range > 0 else None,
                              avail_h / y_range if y_range > 0 else None) if s is not None]
        scale = min(scales) if scales else 1.0
        offset_x = padding + (avail_w - x_range * scale) / 2
        offset_y = padding + (avail_h - y_range * scale) / 2

        def to_pixel(x, y):
            return (offset_x + (x - x_min) * scale, offset_y + (y - y_min) * scale)
        return to_pixel
