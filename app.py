import gradio as gr

from aggregate_by_field.config import MISSING_VALUE_POLICIES, SORT_MODES
from aggregate_by_field.handlers import (
    export_groups_handler,
    field_coverage_text,
    handle_root_change,
    prepare_dataset_payload,
    preview_groups_handler,
)

# --- UI Definition ---
with gr.Blocks(title="Aggregate By Field") as demo:
    gr.Markdown("# Aggregate By Field")
    gr.Markdown("Upload a JSON file and group its records by the value of a field.")

    json_data_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)

            root_path_selector = gr.Dropdown(
                label="Records Path",
                choices=["(root)"],
                value="(root)",
                allow_custom_value=True,
                interactive=True,
            )
            record_count = gr.Textbox(label="Record Count", interactive=False)

            gr.Markdown("### 2. Group")
            field_selector = gr.Dropdown(
                label="Field To Group By",
                choices=[],
                allow_custom_value=True,
                interactive=True,
                info='Use dot notation for nested fields (e.g. "address.city")',
            )
            field_coverage = gr.Textbox(label="Field Coverage", interactive=False)
            output_field_name = gr.Textbox(label="Output Field Name", value="items")
            include_group_key = gr.Checkbox(label="Include Group Key In Output", value=True)

        # Right Panel: Options & Output
        with gr.Column(scale=1):
            gr.Markdown("### 3. Options")
            disable_dot_notation = gr.Checkbox(label="Disable Dot Notation", value=False)
            handle_missing_values = gr.Radio(
                choices=list(MISSING_VALUE_POLICIES),
                value="skip",
                label="Handle Missing Values",
            )
            sort_groups = gr.Radio(choices=list(SORT_MODES), value="none", label="Sort Groups")
            include_item_count = gr.Checkbox(label="Include Item Count", value=False)
            item_count_field_name = gr.Textbox(label="Item Count Field Name", value="itemCount")

            gr.Markdown("### 4. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="grouped")
            preview_btn = gr.Button("Preview Groups")
            export_btn = gr.Button("Export Groups", variant="primary")
            download_output = gr.File(label="Download Result")
            groups_preview = gr.JSON(label="Preview (first 3 groups)")

    form_inputs = [
        field_selector,
        output_field_name,
        include_group_key,
        disable_dot_notation,
        handle_missing_values,
        sort_groups,
        include_item_count,
        item_count_field_name,
    ]

    file_input.upload(
        fn=prepare_dataset_payload,
        inputs=[file_input],
        outputs=[json_data_state, root_path_selector, field_selector, status_msg],
    )

    root_path_selector.change(
        fn=handle_root_change,
        inputs=[json_data_state, root_path_selector],
        outputs=[field_selector, record_count],
    )

    field_selector.change(
        fn=field_coverage_text,
        inputs=[json_data_state, root_path_selector, field_selector, disable_dot_notation],
        outputs=[field_coverage],
    )

    preview_btn.click(
        fn=preview_groups_handler,
        inputs=[json_data_state, root_path_selector] + form_inputs,
        outputs=[groups_preview, status_msg],
    )

    export_btn.click(
        fn=export_groups_handler,
        inputs=[json_data_state, root_path_selector, output_filename] + form_inputs,
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
