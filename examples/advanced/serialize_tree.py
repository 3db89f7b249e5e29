"""Store an abbreviation tree as JSON and render it later."""

from abbrmarkup import Markup, Node
from abbrmarkup.serialization import from_json, to_json

tree = Node(children=[Node("nav", children=[Node("a", value="Home"), Node("a", value="About")])])

json_str = to_json(tree)
restored = from_json(json_str)

print("Same markup:", Markup()(tree) == Markup()(restored))
print(Markup().render_json(json_str))
