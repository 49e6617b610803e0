# scripts/dashboard_templates/__init__.py
# Page template and static client script, shipped as package data.
