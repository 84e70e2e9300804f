"""
Services for branchscout.

Domain services take their git interactors as constructor arguments;
bootstrap() wires the git-backed ones for the CLI.
"""
