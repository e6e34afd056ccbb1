"""
License Gateway Django project.
"""
