"""Runtime shims injected at the very top of the document head.

Bundled framework chunks assume they were loaded from ``<script src>``
tags. Once inlined, two assumptions break:

- ``document.currentScript`` can be ``null`` for the inlined bundle,
  so a getter falls back to the last script element seen so far.
- ``script.getAttribute("src")`` returns ``null`` for inline scripts,
  which some loaders try to resolve a public path from; ``""`` keeps
  them on the relative (already inlined) path.

Only emitted when ``BundleConfig.next_compat`` is on.
"""

RUNTIME_SHIMS_JS = """\
(function(){
  if (typeof document === "undefined") return;
  if (!document.currentScript) {
    var scripts = document.getElementsByTagName("script");
    Object.defineProperty(document, "currentScript", {
      get: function() { return scripts[scripts.length - 1] || null; },
      configurable: true
    });
  }
  var originalGetAttribute = HTMLElement.prototype.getAttribute;
  HTMLElement.prototype.getAttribute = function(name) {
    var value = originalGetAttribute.apply(this, arguments);
    if (name === "src" && value === null && this.tagName === "SCRIPT") return "";
    return value;
  };
})();
"""
