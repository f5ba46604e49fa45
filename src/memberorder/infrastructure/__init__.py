"""Infrastructure layer: AST analysis and configuration loading."""
