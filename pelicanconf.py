# --- Site Information ---
SITENAME = 'imdexer images demo'
SITEURL = ''

# --- Paths ---
PATH = 'content'
ARTICLE_PATHS = ['articles']
STATIC_PATHS = ['media']
ARTICLE_SAVE_AS = 'blog/{slug}.html'
ARTICLE_URL = 'blog/{slug}.html'

TIMEZONE = 'UTC'
DEFAULT_LANG = 'en'

# --- Plugins ---
PLUGIN_PATHS = ['pelican-plugins']
PLUGINS = ['imdexer_images']

# Zones are matched by prefix, first match wins. Indexes are JSON files
# written by the imdexer, relative to PATH.
IMDEXER_ZONES = [
    {'prefix': 'blog/', 'imdexer': 'imdexer/blog.json', 'base_url': '/media/blog'},
    {'prefix': 'cdn/', 'imdexer': 'imdexer/cdn.json', 'base_url': 'https://cdn.example.com/img/'},
]
IMDEXER_SHORTCODE = 'img'
IMDEXER_URL_FILTER = 'img_url'

# --- Markdown Extensions ---
MARKDOWN = {
    'extensions': [
        'markdown.extensions.extra',
        'markdown.extensions.meta',
    ],
    'output_format': 'html5',
}

RELATIVE_URLS = True
