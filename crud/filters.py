"""
Resource filters.

A filter reads its ``parameters`` from the list request's query string and
narrows the queryset. Filters only run when at least one of their parameters
is present.

    class PublishedFilter(Filter):
        parameters = ['published']

        def name(self):
            return 'Published'

        def run(self, queryset, params):
            return queryset.filter(published=params.get('published') == '1')
"""


class Filter:
    parameters = []

    def name(self):
        return self.__class__.__name__

    def is_apply(self, params):
        return any(params.get(parameter) not in (None, '') for parameter in self.parameters)

    def run(self, queryset, params):
        raise NotImplementedError(f"{self.__class__.__name__} must implement run()")

    def apply(self, queryset, params):
        if not self.is_apply(params):
            return queryset
        return self.run(queryset, params)

    def to_dict(self):
        return {'name': self.name(), 'parameters': list(self.parameters)}
