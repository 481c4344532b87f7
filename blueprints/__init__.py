"""
Blueprints Package - Modular application structure
Each blueprint handles a specific domain of functionality
"""

__all__ = ['auth', 'pages', 'blog', 'portfolio', 'admin', 'contact', 'api']
