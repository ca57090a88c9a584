"""
Campus persistence layer: schools, students and addresses on SQLAlchemy.
"""
