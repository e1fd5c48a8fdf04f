import os

from pagination import page_count


def render_status(context, width=80):
    """
    context keys: file_path, page_index, page_size, page_start, page_end,
                  total_rows, total_cols
    """
    fname = context.get('file_path') or ''
    if fname:
        fname = os.path.basename(fname)
    total_rows = context.get('total_rows', 0)
    total_cols = context.get('total_cols', 0)
    page_size = context.get('page_size', 1)
    page_total = page_count(total_rows, page_size)
    page_index = context.get('page_index', 1)
    page_start = context.get('page_start', 0)
    page_end = context.get('page_end', page_start)
    # rows are shown 1-based, same as the serial numbers
    page_info = f"Page {page_index}/{page_total} rows {page_start + 1}-{max(page_start + 1, page_end)} of {total_rows}"
    text = f" {fname} | {total_rows}x{total_cols} | {page_info}"
    return text.ljust(width)[:width]
