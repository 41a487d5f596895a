"""
Reports package

Contains PDF document types built on pdfdocs. Page types are registered in
pdf_pages, which pdfdocs discovers when the app registry is ready.
"""
