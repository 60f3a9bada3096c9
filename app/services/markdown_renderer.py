from markdown import markdown

EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


def render(body: str) -> str:
    return markdown(body or "", extensions=EXTENSIONS, output_format="html5")
