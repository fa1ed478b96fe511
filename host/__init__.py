"""host

Collaborators the engine talks to through a narrow interface:
rendering, audio, preference storage and confirmation prompts.
"""
