"""Core logic for converting Wallabag exports into Karakeep imports.

The Gradio UI lives in `app.py` and the command line in `cli.py`. This
package contains pure functions that:
- parse the Wallabag export
- extract/validate the consumed fields of each entry
- merge extra tags into every bookmark
- stream the Karakeep document to a writable sink
"""

__version__ = "0.1.0"
