"""Sanitize flashcard text: decode escapes and wrap bare subscripts."""

from pizarra import sanitize_flashcard_content

for card in ["x_1 + x_2 = 3", "Keep `a_b` and $y_0$ as they are\\nbut fix z_9"]:
    print(sanitize_flashcard_content(card))
