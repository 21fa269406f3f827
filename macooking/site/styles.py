"""Inline CSS and static assets for the site shell."""

CSS = r"""
:root {
  --bg: #f8f8f8;
  --fg: #1a1a1a;
  --muted: #6a6a6a;
  --border: #e3e3e3;
  --primary: #1f2937;
  --accent: #e4572e;
  --card: #ffffff;
  --page-max: 1040px;
}

html.dark {
  --bg: #111418;
  --fg: #f1f1f1;
  --muted: #a0a6ad;
  --border: #2a2f36;
  --primary: #0b0d10;
  --card: #181c21;
}

* { box-sizing: border-box; }

body {
  font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
  font-size: 16px;
  line-height: 1.6;
  margin: 0;
  background: var(--bg);
  color: var(--fg);
}

a { color: var(--accent); text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

.container { max-width: var(--page-max); margin: 0 auto; padding: 0 1.5rem; }

header.site {
  background: var(--primary);
  color: #f1f1f1;
}
header.site .container {
  display: flex;
  justify-content: space-between;
  align-items: center;
  padding-top: 1rem;
  padding-bottom: 1rem;
  gap: 1rem;
  flex-wrap: wrap;
}
header.site .logo { display: flex; align-items: center; gap: 0.5rem; font-weight: 700; font-size: 1.25rem; color: inherit; }
header.site nav a { margin-left: 1.5rem; color: inherit; }
header.site nav a:hover { color: var(--accent); }

.theme-toggle {
  background: transparent;
  border: 1px solid currentColor;
  color: inherit;
  padding: 0.25rem 0.6rem;
  cursor: pointer;
}

main { padding: 3rem 0; min-height: 60vh; }

h1 { font-size: 1.9rem; margin: 0 0 1.5rem 0; }
h2 { font-size: 1.25rem; margin: 0 0 0.5rem 0; }
h3 { font-size: 1.4rem; margin: 0 0 1rem 0; }

.muted { color: var(--muted); }

.toc ul { display: flex; flex-wrap: wrap; gap: 1.5rem; list-style: none; padding: 0; margin: 0 0 2rem 0; }
.toc a { color: var(--muted); text-decoration: underline; }

.grid { display: grid; gap: 2rem; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); }
.card {
  display: flex;
  flex-direction: column;
  background: var(--card);
  border: 1px solid var(--border);
  border-radius: 8px;
  padding: 1.5rem;
}
.card p { color: var(--muted); }
.card .more { margin-top: auto; font-weight: 600; }

section.related, section.author { margin-top: 4rem; }
section.author { display: flex; flex-direction: column; align-items: center; text-align: center; }
section.author img { width: 96px; height: 96px; border-radius: 50%; border: 2px solid var(--accent); object-fit: cover; }
section.author p { max-width: 28rem; color: var(--muted); }

article.post { max-width: 42rem; margin: 0 auto; }
article.post .post-body { white-space: pre-wrap; overflow-wrap: break-word; }
article.post .back { display: block; margin-top: 2rem; font-weight: 600; }


.not-found { text-align: center; padding: 4rem 0; }
.button { display: inline-block; background: var(--accent); color: #fff; padding: 0.75rem 1.5rem; border-radius: 8px; font-weight: 600; }

footer.site { background: var(--primary); color: #f1f1f1; text-align: center; font-size: 0.875rem; padding: 1.5rem 0; margin-top: 3rem; }

@media (max-width: 700px) {
  header.site nav a { margin-left: 0; margin-right: 1rem; }
}
"""

# Restores the saved theme before first paint and wires the toggle button.
THEME_SCRIPT = r"""
(function () {
  var root = document.documentElement;
  if (localStorage.getItem("theme") === "dark") root.classList.add("dark");
  document.addEventListener("DOMContentLoaded", function () {
    var btn = document.getElementById("theme-toggle");
    if (!btn) return;
    btn.addEventListener("click", function () {
      var dark = root.classList.toggle("dark");
      localStorage.setItem("theme", dark ? "dark" : "light");
    });
  });
})();
"""

LOGO_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="32" height="32" viewBox="0 0 16 16" '
    'fill="none" stroke="currentColor" stroke-width="1">'
    '<circle cx="8" cy="8" r="7"/>'
    '<ellipse cx="8" cy="8" rx="3" ry="7"/>'
    '<path d="M1 8h14M2.5 4.5h11M2.5 11.5h11"/>'
    "</svg>\n"
)
