"""Fixed vocabularies used by the Material for MkDocs rules."""

# Admonition types supported by Material for MkDocs (case-sensitive)
ADMONITION_TYPES = (
    'note',
    'abstract',
    'info',
    'tip',
    'success',
    'question',
    'warning',
    'failure',
    'danger',
    'bug',
    'example',
    'quote',
)

# Comment token expected before a code annotation, keyed by fence language
COMMENT_STYLES = {
    # Hash-style comments
    'python': '#', 'py': '#', 'ruby': '#', 'rb': '#', 'perl': '#', 'pl': '#',
    'bash': '#', 'sh': '#', 'shell': '#', 'yaml': '#', 'yml': '#', 'toml': '#',
    'ini': '#', 'dockerfile': '#', 'makefile': '#', 'cmake': '#', 'r': '#',

    # Double-slash comments
    'javascript': '//', 'js': '//', 'typescript': '//', 'ts': '//', 'jsx': '//',
    'tsx': '//', 'java': '//', 'c': '//', 'cpp': '//', 'c++': '//', 'csharp': '//',
    'cs': '//', 'go': '//', 'rust': '//', 'rs': '//', 'swift': '//', 'kotlin': '//',
    'kt': '//', 'scala': '//', 'php': '//', 'dart': '//', 'groovy': '//',

    # HTML/XML comments
    'html': '<!--', 'xml': '<!--', 'svg': '<!--', 'markdown': '<!--', 'md': '<!--',

    # SQL comments
    'sql': '--', 'postgresql': '--', 'mysql': '--', 'sqlite': '--',

    # Everything else
    'lua': '--', 'haskell': '--', 'hs': '--', 'elm': '--', 'ada': '--',
    'vb': "'", 'vbnet': "'", 'fortran': '!', 'f90': '!',
    'matlab': '%', 'octave': '%', 'latex': '%', 'tex': '%',
}

# Order matters: the first style found before an annotation is reported
KNOWN_COMMENT_TOKENS = ('#', '//', '<!--', '--', "'", '!', '%')

# Fence languages that should be written as ``shell``
SHELL_ALIASES = frozenset({'bash', 'sh', 'zsh'})

MATERIAL_ICONS = frozenset({
    'account', 'account-circle', 'add', 'add-circle', 'arrow-back', 'arrow-forward',
    'check', 'check-circle', 'close', 'delete', 'edit', 'favorite', 'help',
    'home', 'info', 'menu', 'more-vert', 'notifications', 'person', 'search',
    'settings', 'share', 'star', 'warning', 'bookmark', 'calendar-today',
    'download', 'email', 'file-copy', 'folder', 'label', 'lock', 'open-in-new',
    'print', 'refresh', 'save', 'schedule', 'visibility', 'work',
})

FONTAWESOME_ICONS = frozenset({
    'home', 'user', 'cog', 'heart', 'star', 'search', 'envelope', 'phone',
    'calendar', 'clock', 'edit', 'trash', 'download', 'upload', 'link',
    'share', 'print', 'save', 'copy', 'cut', 'paste', 'file', 'folder',
    'image', 'video', 'music', 'book', 'question-circle', 'info-circle',
    'exclamation-triangle', 'check-circle', 'times-circle', 'arrow-left',
    'arrow-right', 'arrow-up', 'arrow-down', 'plus', 'minus', 'github',
    'twitter', 'facebook', 'linkedin', 'instagram',
})

OCTICONS = frozenset({
    'alert', 'archive', 'arrow-down', 'arrow-left', 'arrow-right', 'arrow-up',
    'beaker', 'bell', 'bold', 'book', 'bookmark', 'briefcase', 'broadcast',
    'bug', 'calendar', 'check', 'chevron-down', 'chevron-left', 'chevron-right',
    'chevron-up', 'circle-slash', 'clippy', 'clock', 'cloud-download',
    'cloud-upload', 'code', 'comment', 'comment-discussion', 'credit-card',
    'dash', 'database', 'desktop-download', 'device-camera', 'device-camera-video',
    'device-desktop', 'device-mobile', 'diff', 'diff-added', 'diff-ignored',
    'diff-modified', 'diff-removed', 'diff-renamed', 'ellipsis', 'eye',
    'file-binary', 'file-code', 'file-directory', 'file-media', 'file-pdf',
    'file-text', 'file-zip', 'flame', 'fold', 'gear', 'gift', 'gist',
    'gist-secret', 'git-branch', 'git-commit', 'git-compare', 'git-merge',
    'git-pull-request', 'globe', 'graph', 'heart', 'history', 'home',
    'horizontal-rule', 'hubot', 'inbox', 'info', 'issue-closed', 'issue-opened',
    'issue-reopened', 'italic', 'jersey', 'key', 'keyboard', 'law', 'light-bulb',
    'link', 'link-external', 'list-ordered', 'list-unordered', 'location',
    'lock', 'logo-gist', 'logo-github', 'mail', 'mail-read', 'mail-reply',
    'mark-github', 'markdown', 'megaphone', 'mention', 'milestone', 'mirror',
    'mortar-board', 'mute', 'no-newline', 'octoface', 'organization', 'package',
    'paintcan', 'pencil', 'person', 'pin', 'plug', 'plus', 'primitive-dot',
    'primitive-square', 'pulse', 'question', 'quote', 'radio-tower', 'reply',
    'repo', 'repo-clone', 'repo-force-push', 'repo-forked', 'repo-pull',
    'repo-push', 'rocket', 'rss', 'ruby', 'search', 'server', 'settings',
    'shield', 'sign-in', 'sign-out', 'smiley', 'squirrel', 'star', 'stop',
    'sync', 'tag', 'tasklist', 'telescope', 'terminal', 'text-size',
    'three-bars', 'thumbsdown', 'thumbsup', 'tools', 'trashcan', 'triangle-down',
    'triangle-left', 'triangle-right', 'triangle-up', 'unfold', 'unmute',
    'unverified', 'verified', 'versions', 'watch', 'x', 'zap',
})

# (shortcode regex, icon set label, allowed names); None means not validated
ICON_SETS = (
    (r':material-([a-zA-Z0-9\-_]+):', 'material', MATERIAL_ICONS),
    (r':fontawesome-(?:solid|regular|brands)-([a-zA-Z0-9\-_]+):', 'fontawesome', FONTAWESOME_ICONS),
    (r':octicons-([a-zA-Z0-9\-_]+):', 'octicons', OCTICONS),
    # Simple Icons has thousands of entries; shortcodes are accepted as-is
    (r':simple-([a-zA-Z0-9\-_]+):', 'simple-icons', None),
)

MERMAID_DIAGRAM_TYPES = (
    'graph', 'flowchart', 'sequenceDiagram', 'classDiagram', 'stateDiagram',
    'erDiagram', 'journey', 'gantt', 'pie', 'requirementDiagram', 'gitGraph',
)

FLOWCHART_DIRECTIONS = ('TD', 'TB', 'BT', 'RL', 'LR')

LATEX_ENVIRONMENTS = (
    'align', 'equation', 'gather', 'split', 'multline', 'cases',
    'matrix', 'pmatrix', 'bmatrix', 'vmatrix', 'Vmatrix',
)

DISPLAY_ONLY_COMMANDS = ('\\displaystyle', '\\begin{align}', '\\begin{equation}')

VAGUE_HEADINGS = frozenset({
    'introduction', 'overview', 'getting started', 'basics', 'advanced',
    'miscellaneous', 'other', 'additional', 'more', 'extra', 'general',
})

HIDE_OPTIONS = ('navigation', 'toc', 'footer', 'path', 'tags', 'feedback')

# Keyword in a version notice -> admonition types that suit it
VERSION_NOTICE_TYPES = {
    'deprecated': ('warning', 'danger'),
    'removed': ('danger', 'warning'),
    'added': ('info', 'note', 'tip'),
    'changed': ('info', 'note'),
    'version': ('info', 'note'),
}

VERSION_KEYWORDS = ('version', 'deprecated', 'added', 'removed', 'changed', 'since')

STANDARD_BANNER_FILES = (
    'version-banner.md',
    'deprecation-notice.md',
    'version-warning.md',
    'banner.md',
)

BANNER_EXTENSIONS = ('.md', '.txt', '.html')
