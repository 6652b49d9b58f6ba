import sys
import os.path

import oxytengu

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.doctest', 'sphinx.ext.viewcode',
    'sphinx.ext.mathjax'
]
project = 'oxytengu'
source_suffix = '.rst'
master_doc = 'index'

version = release = oxytengu.__version__
copyright = 'OxyTengu Team'

epub_basename = 'oxytengu - {}'.format(version)
epub_author = 'OxyTengu Team'

html_theme = 'sphinx_rtd_theme'


# vim: sw=4:et:ai
