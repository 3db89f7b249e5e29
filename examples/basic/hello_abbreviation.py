"""Render an abbreviation tree in 3 lines — zero config, zero deps."""

from abbrmarkup import Node, render

tree = Node(children=[Node("ul", children=[Node("li", value="Hello"), Node("li", value="World")])])
html = render(tree)
print(html)
