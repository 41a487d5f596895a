"""
pdfdocs

Django add-on for composing multi-page PDF documents from template fragments.
Pages are laid out on a drawing canvas, list pages paginate themselves, and
generated files are kept on disk together with a raster preview.
"""
