from asciiseq import SequenceDiagram

diagram = SequenceDiagram(
    """
    object Client Server
    Client->Server: GET /status
    right of Server: checks cache
    Server->Client: 200 OK
    """
)

print(diagram.render())
