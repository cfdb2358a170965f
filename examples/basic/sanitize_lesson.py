"""Clean a generated lesson for a Markdown + KaTeX renderer.

Run::

    python examples/basic/sanitize_lesson.py

"""

from pizarra import extract_lesson_metadata, sanitize
from pizarra.sanitize import lesson_render

raw = (
    '```json\n{"title": "Limits", "readingTimeMinutes": 6.5}\n```\n'
    "# Limits\\n\\nThe limit \\[ \\lim_{x \\to 0} \\frac{\\sin x}{x} = 1 \\] is classic.\\n"
    "```python\\nprint('unterminated')"
)

meta = extract_lesson_metadata(raw).metadata
print("Title:", meta.title if meta else None)
print("Reading time:", meta.reading_time_minutes if meta else None)
print()
print(sanitize(raw, policy=lesson_render))
