"""Emit editor tab stops and keep a reusable formatter around."""

from abbrmarkup import Attribute, Markup, Node, Profile, create_token

markup = Markup(Profile(indentation="  ", self_closing_style="xhtml"), field=create_token)

tree = Node(
    children=[
        Node("a", attributes=[Attribute("href")], value="${1:link text}"),
        Node("img", attributes=[Attribute("src"), Attribute("alt")], self_closing=True),
        Node(value="<!-- $1 -->", children=[Node("p")]),
    ]
)

print(markup(tree))
