import ruckus_smartzone_api
import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath('..'))

project = 'ruckus-smartzone-api'
copyright = f'{datetime.now().year}, ruckus-smartzone-api contributors'
author = 'ruckus-smartzone-api contributors'

release = ruckus_smartzone_api.__version__ if hasattr(
    ruckus_smartzone_api, '__version__') else '0.1.0'

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

autosummary_generate = True
autodoc_member_order = 'bysource'
autoclass_content = 'both'
autodoc_typehints = 'description'
autodoc_typehints_format = 'short'
autodoc_inherit_docstrings = True

autosummary_imported_members = False
autosummary_ignore_module_all = False

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', '_autosummary']


def skip_private_models(app, what, name, obj, skip, options):
    # Nested zone settings are documented through SmartZoneZone.
    if (getattr(obj, '__module__', None) == 'ruckus_smartzone_api.models.zone'
            and name.rsplit('.', 1)[-1].startswith('Zone')):
        return True
    return skip


def setup(app):
    app.connect('autodoc-skip-member', skip_private_models)


templates_path = ['_templates']
html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
html_title = f"{project} Documentation"

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'requests': ('https://requests.readthedocs.io/en/latest/', None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_include_private_with_doc = False
napoleon_use_admonition_for_examples = True
napoleon_use_admonition_for_notes = True
napoleon_use_ivar = True
napoleon_use_param = True
napoleon_use_rtype = True
