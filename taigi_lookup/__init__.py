"""Discord bot that looks up Taiwanese Hokkien words across several dictionaries."""
