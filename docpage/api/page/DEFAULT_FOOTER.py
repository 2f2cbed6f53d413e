"""Built-in page footer (Jinja2 template)."""

DEFAULT_FOOTER = """</div>
</body>
</html>
"""
