"""
Code Templates
Flow: Template name + context → Jinja2 environment → generated source text

Generated code is JSX/TypeScript, so autoescaping is off and string
literals go through the js_string filter instead.
"""

import json
from typing import Any, Dict

from jinja2 import DictLoader, Environment, StrictUndefined

THEME_MODULE = "theme/module.tsx"
THEME_USAGE = "theme/usage.tsx"
DYNAMIC_MANIFEST = "dynamic/manifest.tsx"
DYNAMIC_USAGE = "dynamic/usage.tsx"
COMPONENT_USAGE = "component/usage.tsx"
PAGE_LAYOUT = "page/layout.tsx"
DEFAULT_PAGE_TEMPLATE = "dashboard"

_TEMPLATES: Dict[str, str] = {
    THEME_MODULE: """\
// Theme: {{ name }} ({{ label }})

export const {{ export_name }} = {
  name: {{ name | js_string }},
  label: {{ label | js_string }},
  colors: {
{% for key, value in colors.items() %}
    {{ key | js_string }}: {{ value | js_string }},
{% endfor %}
  }
}

// Usage in tailwind.config.js
// module.exports = {
//   theme: {
//     extend: {
//       colors: {{ export_name }}.colors
//     }
//   }
// }
""",
    THEME_USAGE: """\
// Import the theme
import { {{ export_name }} } from "{{ import_path }}"

// Apply theme to Tailwind config
// tailwind.config.js
module.exports = {
  theme: {
    extend: {
      colors: {{ export_name }}.colors
    }
  }
}

// Or use with ThemeProvider
export function ThemeProvider({ children }) {
  return (
    <div className="theme-{{ name }}">
      {children}
    </div>
  )
}""",
    DYNAMIC_MANIFEST: """\
// Dynamic Component: {{ name }}
// {{ description }}

// This component consists of {{ file_lines | length }} files:
{% for line in file_lines %}
// - {{ line }}
{% endfor %}

// Registry Dependencies:
{% for dep in registry_dependencies %}
// - {{ dep }}
{% else %}
// None
{% endfor %}

// NPM Dependencies:
{% for dep in dependencies %}
// - {{ dep }}
{% else %}
// None
{% endfor %}
""",
    DYNAMIC_USAGE: """\
// Import the dynamic component
import { {{ identifier }} } from "{{ import_path }}"

// Use in your component
export default function MyPage() {
  return (
    <div>
      <{{ identifier }} />
    </div>
  )
}""",
    COMPONENT_USAGE: """\
import { {{ identifier }} } from "{{ import_path }}"

export default function Example() {
  return (
    <div className="p-4">
      <{{ identifier }} />
    </div>
  )
}""",
    PAGE_LAYOUT: """\
import { useState, useEffect } from "react"
import { motion } from "framer-motion"
{% for line in imports %}
{{ line }}
{% endfor %}

{% include page_template %}""",
    "page/dashboard.tsx": """\
export default function Dashboard() {
  return (
    <div className="min-h-screen bg-background">
      <div className="container mx-auto py-6">
        <h1 className="text-3xl font-bold mb-6">Dashboard</h1>
        <div className="grid gap-6">
          {{ components }}
        </div>
      </div>
    </div>
  )
}""",
    "page/landing.tsx": """\
export default function Landing() {
  return (
    <div className="min-h-screen">
      <section className="hero py-20">
        <div className="container mx-auto text-center">
          <h1 className="text-5xl font-bold mb-6">Welcome to AxionJS</h1>
          <p className="text-xl mb-8">Beautiful components for modern web applications</p>
          {{ components }}
        </div>
      </section>
    </div>
  )
}""",
    "page/auth.tsx": """\
export default function Auth() {
  return (
    <div className="min-h-screen flex items-center justify-center bg-background">
      <div className="w-full max-w-md">
        {{ components }}
      </div>
    </div>
  )
}""",
    "page/hero.tsx": """\
export default function Hero() {
  return (
    <div className="w-full">
      {{ components }}
    </div>
  )
}""",
}


def js_string(value: Any) -> str:
    """Double-quoted JavaScript string literal."""
    return json.dumps(str(value), ensure_ascii=False)


def _build_environment() -> Environment:
    env = Environment(
        loader=DictLoader(_TEMPLATES),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["js_string"] = js_string
    return env


environment = _build_environment()


def page_template_name(page_type: str) -> str:
    """Template for a page type, the dashboard layout when there is none."""
    name = f"page/{page_type}.tsx"
    if name in _TEMPLATES:
        return name
    return f"page/{DEFAULT_PAGE_TEMPLATE}.tsx"


def render(template_name: str, **context: Any) -> str:
    """Render a named template."""
    return environment.get_template(template_name).render(**context)
