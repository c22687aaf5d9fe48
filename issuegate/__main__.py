from issuegate.cli import entrypoint

entrypoint()
