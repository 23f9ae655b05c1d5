"""
String helpers for deriving resource labels and URI keys from class names.
"""
import re

from django.utils.text import camel_case_to_spaces

_UNCOUNTABLE = {'data', 'equipment', 'information', 'media', 'news', 'series', 'species'}
_IRREGULAR = {
    'person': 'people',
    'child': 'children',
    'man': 'men',
    'woman': 'women',
}
_IRREGULAR_SINGULAR = {plural: singular for singular, plural in _IRREGULAR.items()}


def _match_case(source, word):
    if source.isupper() and len(source) > 1:
        return word.upper()
    if source[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def _split_last_word(value):
    match = re.search(r'([A-Za-z]+)$', value)
    if not match:
        return value, ''
    return value[:match.start()], match.group(1)


def pluralize(value):
    """
    Pluralize the last word of ``value``.

    >>> pluralize('Blog Post')
    'Blog Posts'
    >>> pluralize('category')
    'categories'
    """
    head, word = _split_last_word(value)
    lower = word.lower()
    if not word or lower in _UNCOUNTABLE:
        return value
    if lower in _IRREGULAR:
        plural = _IRREGULAR[lower]
    elif re.search(r'[^aeiou]y$', lower):
        plural = lower[:-1] + 'ies'
    elif re.search(r'(s|x|z|ch|sh)$', lower):
        plural = lower + 'es'
    else:
        plural = lower + 's'
    return head + _match_case(word, plural)


def singularize(value):
    """
    Singularize the last word of ``value``.

    >>> singularize('Categories')
    'Category'
    """
    head, word = _split_last_word(value)
    lower = word.lower()
    if not word or lower in _UNCOUNTABLE:
        return value
    if lower in _IRREGULAR_SINGULAR:
        singular = _IRREGULAR_SINGULAR[lower]
    elif lower.endswith('ies') and len(lower) > 3:
        singular = lower[:-3] + 'y'
    elif re.search(r'(ss|x|z|ch|sh)es$', lower):
        singular = lower[:-2]
    elif lower.endswith('s') and not lower.endswith('ss'):
        singular = lower[:-1]
    else:
        singular = lower
    return head + _match_case(word, singular)


def title_words(value):
    """'BlogPost' -> 'Blog Post'"""
    return camel_case_to_spaces(value).title()


def kebab(value):
    """'BlogPostResource' -> 'blog-post-resource'"""
    return camel_case_to_spaces(value).replace(' ', '-')


def natural_key(value):
    """
    Sort key comparing digit runs numerically ('Item 2' < 'Item 10').
    """
    return [
        (0, int(part), '') if part.isdigit() else (1, 0, part)
        for part in re.split(r'(\d+)', str(value))
        if part
    ]
