import re

PATTERNS = {
    # {{tag}}, {{{raw}}}, {{!-- comment --}} or \{{escaped}}
    # Quoted strings inside a tag may contain }}.
    "TAG": re.compile(
        r'(?P<escaped>\\)?\{\{'
        r'(?:!--(?P<comment>.*?)--\}\}'
        r'|(?P<triple>\{)?(?P<body>(?:"(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\'|.)*?)(?(triple)\}\}\}|\}\}))',
        re.DOTALL,
    ),

    # "double", 'single' or a bare token
    "PARAM": re.compile(r'"(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\'|[^\s]+'),

    "NUMBER": re.compile(r'^-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?$'),

    "HELPER_NAME": re.compile(r'^[A-Za-z_][\w\-]*$'),
}
