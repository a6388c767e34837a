"""Browser runtime for in-document navigation.

A self-executing script that emulates multi-page browsing inside one
document. Everything it needs is already embedded, so every transition
is synchronous and nothing is ever fetched:

- **State**: one object, ``{routes, currentRoute, initialized}``, created
  once and closed over by every handler.
- **Init** (``DOMContentLoaded``, or next tick when already interactive):
  decode ``ROUTE_MAP_BASE64`` once, as UTF-8 from its binary payload.
  A decode failure is logged and leaves an empty table. A non-root hash
  renders that route; otherwise the delivered index page stays.
- **renderRoute(path, skipIfSame)**: canonicalize, skip when unchanged
  and asked to, swap the mount node's markup, update the title, rebuild
  every ``<script>`` so it runs, scroll to top, dispatch the route-change
  event. Unknown paths fall back through the not-found routes, and with
  no fallback the display is left alone and a warning is logged.
- **Interception**: root-relative ``<a>`` clicks and relative
  ``history.pushState`` / ``replaceState`` calls become hash
  assignments; ``hashchange`` always re-renders.
- **API**: ``window.<router_global>`` exposes ``navigate``,
  ``getCurrentRoute``, ``getRouteMap`` and ``renderRoute``.
"""

import json

from sitepack.routing.table import ROUTE_MAP_IDENTIFIER

DEFAULT_ROUTER_GLOBAL = "__SITEPACK_ROUTER__"
DEFAULT_ROUTE_CHANGE_EVENT = "sitepack:route-change"


def next_compat_snippet(build_id: str) -> str:
    """Stubs that keep a Next.js runtime from fetching page data or chunks."""
    next_data = json.dumps(
        {"props": {"pageProps": {}}, "page": "/", "query": {}, "buildId": build_id}
    )
    return f"""
  window.__NEXT_DATA__ = window.__NEXT_DATA__ || {next_data};
  window.__NEXT_P = window.__NEXT_P || [];
"""


def navigation_runtime(
    encoded_routes: str,
    *,
    mount_id: str = "__next",
    not_found_routes: tuple[str, ...] = ("/404", "/_not-found"),
    router_global: str = DEFAULT_ROUTER_GLOBAL,
    route_change_event: str = DEFAULT_ROUTE_CHANGE_EVENT,
    compat: str = "",
) -> str:
    """Return the navigation runtime source with the route table embedded.

    Args:
        encoded_routes: Base64 JSON route table (``RouteTable.encode()``).
        mount_id: Id of the element whose content is swapped per route.
        not_found_routes: Fallback routes tried in order for unknown paths.
        router_global: Name of the ``window`` property holding the API.
        route_change_event: ``CustomEvent`` name dispatched after a render.
        compat: Extra statements run before the router installs itself.
    """
    fallbacks = json.dumps(list(not_found_routes))
    return f"""
(function() {{
  const {ROUTE_MAP_IDENTIFIER} = "{encoded_routes}";
  const MOUNT_ID = {json.dumps(mount_id)};
  const NOT_FOUND_ROUTES = {fallbacks};
  const ROUTE_CHANGE_EVENT = {json.dumps(route_change_event)};
{compat}
  const state = {{ routes: {{}}, currentRoute: "/", initialized: false }};

  function decodeRoutes(encoded) {{
    const binary = atob(encoded);
    const bytes = new Uint8Array(binary.length);
    for (let i = 0; i < binary.length; i++) bytes[i] = binary.charCodeAt(i);
    return JSON.parse(new TextDecoder("utf-8").decode(bytes));
  }}

  function normalizePath(path) {{
    if (!path || path === "/") return "/";
    if (path.charAt(0) !== "/") path = "/" + path;
    const stripped = path.replace(/\\/+$/, "");
    return stripped || "/";
  }}

  function getHashPath() {{
    let raw = window.location.hash.slice(1);
    try {{ raw = decodeURI(raw); }} catch (err) {{ /* malformed escape: keep the raw hash */ }}
    return normalizePath(raw);
  }}

  function mountNode() {{
    return document.getElementById(MOUNT_ID) || document.body;
  }}

  function lookup(path) {{
    const route = state.routes[path];
    return route && route.body ? route : null;
  }}

  function titleOf(head) {{
    const match = head && head.match(/<title[^>]*>([\\s\\S]*?)<\\/title>/i);
    if (!match) return null;
    const decoder = document.createElement("textarea");
    decoder.innerHTML = match[1];
    return decoder.value;
  }}

  function runScripts(root) {{
    root.querySelectorAll("script").forEach(function(oldScript) {{
      const script = document.createElement("script");
      Array.from(oldScript.attributes).forEach(function(attr) {{
        script.setAttribute(attr.name, attr.value);
      }});
      script.textContent = oldScript.textContent;
      oldScript.parentNode.replaceChild(script, oldScript);
    }});
  }}

  function mount(route, path) {{
    const title = titleOf(route.head);
    if (title !== null) document.title = title;
    const root = mountNode();
    root.innerHTML = route.body;
    runScripts(root);
    window.scrollTo(0, 0);
    state.currentRoute = path;
    document.dispatchEvent(new CustomEvent(ROUTE_CHANGE_EVENT, {{ detail: {{ path: path }} }}));
  }}

  function renderRoute(path, skipIfSame) {{
    path = normalizePath(path);
    if (skipIfSame && path === state.currentRoute) return;

    const route = lookup(path);
    if (route) {{
      mount(route, path);
      return;
    }}

    for (let i = 0; i < NOT_FOUND_ROUTES.length; i++) {{
      const fallback = lookup(NOT_FOUND_ROUTES[i]);
      if (fallback) {{
        console.warn("Route not found:", path, "- rendering", NOT_FOUND_ROUTES[i]);
        mount(fallback, path);
        return;
      }}
    }}
    console.warn("Route not found:", path, "- available routes:", Object.keys(state.routes));
  }}

  function isRelativeUrl(url) {{
    return typeof url === "string" && url.length > 0 &&
      url.charAt(0) !== "#" && !/^[a-z][a-z0-9+.-]*:/i.test(url) && url.indexOf("//") !== 0;
  }}

  const originalPushState = history.pushState.bind(history);
  const originalReplaceState = history.replaceState.bind(history);

  history.pushState = function(data, unused, url) {{
    if (isRelativeUrl(url)) {{
      window.location.hash = url;
      return;
    }}
    return originalPushState(data, unused, url);
  }};

  history.replaceState = function(data, unused, url) {{
    if (isRelativeUrl(url)) {{
      window.location.hash = url;
      return;
    }}
    return originalReplaceState(data, unused, url);
  }};

  document.addEventListener("click", function(event) {{
    let target = event.target;
    while (target && target !== document && target.tagName !== "A") {{
      target = target.parentElement;
    }}
    if (!target || target === document || target.tagName !== "A") return;

    const href = target.getAttribute("href");
    if (!href || href.charAt(0) !== "/" || href.indexOf("//") === 0) return;
    if (target.target === "_blank" || target.hasAttribute("download")) return;

    event.preventDefault();
    window.location.hash = href;
  }}, true);

  window.addEventListener("hashchange", function() {{
    renderRoute(getHashPath(), false);
  }});

  function init() {{
    if (state.initialized) return;
    state.initialized = true;
    try {{
      state.routes = decodeRoutes({ROUTE_MAP_IDENTIFIER});
    }} catch (err) {{
      console.error("Failed to decode route map", err);
      state.routes = {{}};
    }}
    const initialPath = getHashPath();
    if (initialPath !== "/") renderRoute(initialPath, false);
  }}

  if (document.readyState === "loading") {{
    document.addEventListener("DOMContentLoaded", init);
  }} else {{
    setTimeout(init, 0);
  }}

  window.{router_global} = {{
    navigate: function(path) {{ window.location.hash = path; }},
    getCurrentRoute: function() {{ return state.currentRoute; }},
    getRouteMap: function() {{ return state.routes; }},
    renderRoute: renderRoute,
  }};
}})();
"""
