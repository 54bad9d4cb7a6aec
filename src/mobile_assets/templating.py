"""Placeholder substitution for platform path templates."""

PROJECT_NAME_TOKEN = "$PROJECT_NAME"


def resolve_template(template: str, project_name: str) -> str:
    """Replace every ``$PROJECT_NAME`` in *template* with *project_name*.

    Examples:
        '$PROJECT_NAME/Resources/icons' -> 'HelloCordova/Resources/icons'
        'res' -> 'res'
    """
    return template.replace(PROJECT_NAME_TOKEN, project_name)
