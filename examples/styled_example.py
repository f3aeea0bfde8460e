from rich.console import Console

from asciiseq import SequenceDiagram

SOURCE = """
// login handshake
object User App Auth
User->App: sign in
App->Auth: verify\\ncredentials
Auth->Auth: hash password
left of User: waits
Auth->App: token
App->User: welcome
"""

diagram = SequenceDiagram(
    SOURCE,
    box_style="rounded",
    connector_style="cyan",
    note_style="[yellow]",
)

console = Console()
console.print(diagram.render(include_markup=True), soft_wrap=True)
