"""Translate BBCode to HTML in 3 lines — zero config, zero deps."""

from corchetes import translate

html = translate("[b]Hello[/b] [color=#667eea]World[/color]! <script> stays text.")
print(html)
