"""Document shell template and its kida environment.

The shell is the only markup sitepack writes itself; everything inside
``<style>``, the bundle ``<script>``, the mount node and the router
``<script>`` is passed in pre-rendered as ``Markup``.
"""

from functools import cache

from kida import Environment

SHELL_TEMPLATE = """\
<!DOCTYPE html>
<html{{ html_attrs }}>
<head>
<meta charset="utf-8">
{% if shims %}
<script>{{ shims }}</script>
{% end %}
<meta name="viewport" content="width=device-width, initial-scale=1">
<meta name="sitepack-build" content="{{ build_id }}">
{% for tag in meta %}
{{ tag }}
{% end %}
<title>{{ title }}</title>
<style>
{{ css }}
</style>
<script>
/* SITEPACK_BUNDLE_START */
{{ js }}
/* SITEPACK_BUNDLE_END */
</script>
</head>
<body{{ body_attrs }}>
<div id="{{ mount_id }}">
{{ body }}
</div>
<script>
/* SITEPACK_ROUTER_START */
{{ router }}
/* SITEPACK_ROUTER_END */
</script>
</body>
</html>
"""


@cache
def create_environment() -> Environment:
    """Create the kida environment used for the document shell.

    Created once per process; the environment is never mutated after.
    """
    return Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)


def render_shell(context: dict[str, object]) -> str:
    template = create_environment().from_string(SHELL_TEMPLATE)
    return template.render(context)
