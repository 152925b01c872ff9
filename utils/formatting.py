"""utils/formatting.py"""


def format_result(value, precision=15):
    """按 %.{precision}G 输出结果，例如 14、0.333333333333333、1E+20、INF、NAN"""
    if not 1 <= precision <= 17:
        raise ValueError(f"precision must be between 1 and 17, got {precision}")
    return '%.*G' % (precision, value)
