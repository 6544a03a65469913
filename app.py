import gradio as gr

from wallabag_to_karakeep.config import get_settings
from wallabag_to_karakeep.handlers import (
    convert_handler,
    load_export_with_preview,
    preview_handler,
)
from wallabag_to_karakeep.io_utils import configure_logging

settings = get_settings()

# --- UI Definition ---
with gr.Blocks(title="Wallabag to Karakeep") as demo:
    gr.Markdown("# Wallabag to Karakeep Converter")
    gr.Markdown("Upload a Wallabag JSON export and download a Karakeep bookmark import.")

    # State
    records_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload Wallabag Export", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)
            record_count = gr.Textbox(label="Entry Count", interactive=False)

            gr.Markdown("### 2. Extra Tags")
            gr.Markdown("Added to every bookmark. Separate with commas or new lines.")
            tags_input = gr.Textbox(
                label="Extra Tags",
                value=", ".join(settings.extra_tags),
                placeholder="wallabag",
                lines=2,
            )

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 3. Convert")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="karakeep_import")
            load_preview_btn = gr.Button("Load Preview")
            convert_btn = gr.Button("Convert", variant="primary")
            download_output = gr.File(label="Download Result")
            preview = gr.JSON(label="Preview (first 3 entries)")
            failures = gr.Dataframe(
                headers=["Index", "Cause"],
                datatype=["number", "str"],
                col_count=(2, "fixed"),
                interactive=False,
                label="Entries that failed to convert",
            )

    file_input.upload(
        fn=load_export_with_preview,
        inputs=[file_input],
        outputs=[records_state, status_msg, record_count, preview, failures],
    )

    load_preview_btn.click(
        fn=preview_handler,
        inputs=[records_state, tags_input],
        outputs=[preview, failures],
    )

    convert_btn.click(
        fn=convert_handler,
        inputs=[records_state, tags_input, output_filename],
        outputs=[download_output, status_msg, failures],
    )

if __name__ == "__main__":
    configure_logging(settings.log_level)
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
