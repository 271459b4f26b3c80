"""ClickUp API token used by every docs tool."""

from .base import CredentialSpec

CLICKUP_TOKEN = CredentialSpec(
    name="clickup",
    env_var="CLICKUP_API_TOKEN",
    tools=[
        "clickup_get_doc_content",
        "clickup_search_docs",
        "clickup_get_docs_from_workspace",
        "clickup_get_doc_pages",
        "clickup_get_doc_page",
        "clickup_create_doc",
        "clickup_update_doc",
        "clickup_delete_doc",
        "clickup_get_doc",
        "clickup_create_doc_page",
        "clickup_update_doc_page",
        "clickup_delete_doc_page",
        "clickup_get_doc_sharing",
        "clickup_update_doc_sharing",
        "clickup_create_doc_from_template",
        "clickup_docs_test_connection",
    ],
    help_url="https://developer.clickup.com/docs/authentication",
    description="ClickUp personal API token for reading and editing Docs",
)
