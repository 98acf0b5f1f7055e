"""Shared styles and navigation components for consistent page design."""

from __future__ import annotations

import streamlit as st

# Route constants
ROUTES = {
    "checker": "/",
    "about": "/About",
}

# Navigation labels
NAV_LABELS = {
    "checker": "Encode Checkr",
    "about": "About",
}


def render_page_styles() -> None:
    """Render consistent page styles across all pages."""
    st.markdown(
        """
<style>
@import url('https://fonts.googleapis.com/css2?family=Manrope:wght@400;500;600;700&family=JetBrains+Mono:wght@400;600&display=swap');

:root {
  --text-ink: #0f3328;
  --text-subtle: #1b7a5f;
  --line: #c9e2d6;
  --primary: #1b7a5f;
}

html, body, [class*="st-"], .stMarkdown, .stText, .stCaption {
  font-family: "Manrope", "Segoe UI", sans-serif !important;
}

code, pre {
  font-family: "JetBrains Mono", monospace !important;
}

[data-testid="stMainBlockContainer"] {
  max-width: 1200px;
  padding-top: 1rem !important;
}

/* Page header */
.page-header {
  margin-bottom: 1.5rem;
  padding-bottom: 1.25rem;
  border-bottom: 1px solid rgba(27, 122, 95, 0.1);
  text-align: center;
}

.page-header h1 {
  margin: 0 0 0.5rem 0;
  font-size: clamp(1.5rem, 3vw, 2.2rem);
  color: var(--text-ink);
}

.page-header p {
  margin: 0 auto;
  color: var(--text-subtle);
  font-size: 0.95rem;
  max-width: 65ch;
}

/* Navigation pills */
.nav-pills {
  display: flex;
  justify-content: center;
  gap: 0.5rem;
  margin-bottom: 1.5rem;
}

.nav-pill {
  padding: 0.4rem 0.9rem;
  border: 1px solid var(--line);
  border-radius: 999px;
  color: var(--text-ink) !important;
  text-decoration: none !important;
  font-weight: 600;
  font-size: 0.85rem;
}

.nav-pill.active {
  background: var(--primary);
  border-color: var(--primary);
  color: white !important;
}

.page-footer {
  margin-top: 3rem;
  padding-top: 1.5rem;
  border-top: 1px solid rgba(27, 122, 95, 0.1);
  text-align: center;
  color: var(--text-subtle);
  font-size: 0.9rem;
}
</style>
""",
        unsafe_allow_html=True,
    )


def render_nav_pills(current_page: str) -> None:
    """Render navigation pills with the current page highlighted.

    Args:
        current_page: Key from NAV_LABELS to mark as active (e.g., "checker", "about")
    """
    pills = []
    for key in ["checker", "about"]:
        active_class = " active" if key == current_page else ""
        pills.append(
            f'<a class="nav-pill{active_class}" href="{ROUTES[key]}" target="_self">{NAV_LABELS[key]}</a>'
        )

    st.markdown(
        f'<div class="nav-pills">{"".join(pills)}</div>',
        unsafe_allow_html=True,
    )


def render_page_header(title: str, description: str) -> None:
    """Render a consistent page header.

    Args:
        title: Page title
        description: Page description
    """
    st.markdown(
        f"""
<div class="page-header">
  <h1>{title}</h1>
  <p>{description}</p>
</div>
""",
        unsafe_allow_html=True,
    )


def render_page_footer() -> None:
    """Render a consistent page footer."""
    st.markdown(
        """
<div class="page-footer">
  Built with Streamlit
</div>
""",
        unsafe_allow_html=True,
    )
