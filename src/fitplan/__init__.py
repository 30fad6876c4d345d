"""fitplan: AI-generated workout and diet plans."""

__version__ = "0.1.0"
