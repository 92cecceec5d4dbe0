import logging

logger = logging.getLogger(__name__)


def build_header(led_count):
    fields = ["FRAME_ID"]
    for i in range(led_count):
        fields += [f"R_{i}", f"G_{i}", f"B_{i}"]
    return ",".join(fields)


def build_row(frame, colors):
    fields = [str(frame)]
    for r, g, b in colors:
        fields += [str(r), str(g), str(b)]
    return ",".join(fields)


def emit_rows(led_count, frame_count, color_for):
    """Header plus one row per frame.

    ``color_for(frame)`` returns a callable mapping an LED index to its
    (r, g, b) for that frame, so per-frame work is done once.
    """
    rows = [build_header(led_count)]
    for f in range(frame_count):
        color_of = color_for(f)
        rows.append(build_row(f, (color_of(i) for i in range(led_count))))
    logger.debug("emitted %d rows for %d leds", len(rows), led_count)
    return rows


def write_csv(rows, fp):
    for row in rows:
        fp.write(row)
        fp.write("\n")
