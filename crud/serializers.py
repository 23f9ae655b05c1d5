"""
Validation serializers built from a resource's configuration.

    fields()     -> the writable model fields
    rules()      -> extra validators per field
    messages()   -> error messages keyed 'field.code'
    attributes() -> display names of fields in error messages
"""
from rest_framework import serializers


def _build_extra_kwargs(resource, instance):
    extra_kwargs = {}

    for field in resource.fields():
        kwargs = extra_kwargs.setdefault(field.name, {})
        if field.required:
            kwargs['required'] = True
            kwargs['allow_null'] = False

    for name, validators in resource.rules(instance).items():
        extra_kwargs.setdefault(name, {})['validators'] = list(validators)

    for key, message in resource.messages().items():
        name, _, code = key.partition('.')
        if code:
            extra_kwargs.setdefault(name, {}).setdefault('error_messages', {})[code] = message

    for name, label in resource.attributes().items():
        extra_kwargs.setdefault(name, {})['label'] = label

    return extra_kwargs


def build_serializer_class(resource, instance=None):
    """
    Create a ModelSerializer subclass for saving the resource's model.

    Args:
        resource: The Resource being saved
        instance: The model instance being updated, or None on create

    Returns:
        ModelSerializer subclass
    """
    field_names = [field.name for field in resource.fields()]
    meta = type('Meta', (), {
        'model': resource.model,
        'fields': field_names,
        'extra_kwargs': _build_extra_kwargs(resource, instance),
    })
    name = f"{resource.model.__name__}ResourceSerializer"
    return type(name, (serializers.ModelSerializer,), {'Meta': meta})


def validate_input(resource, data, instance, partial=False):
    """
    Validate submitted data for the resource.

    Args:
        resource: The Resource being saved
        data: Submitted data
        instance: Model instance to save, unsaved on create
        partial: Accept a subset of the fields (PATCH)

    Returns:
        dict: validated data

    Raises:
        rest_framework.exceptions.ValidationError
    """
    serializer_class = build_serializer_class(resource, instance)
    bound = None if instance._state.adding else instance
    serializer = serializer_class(bound, data=data, partial=partial)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def build_selection_serializer_class(resource):
    """
    Create a Serializer validating the ``ids`` picked for a bulk action.

    Each id must be the primary key of an existing record of the resource's
    model. A missing or empty ``ids`` validates to an empty selection.
    """
    ids = serializers.PrimaryKeyRelatedField(
        many=True,
        required=False,
        queryset=resource.model._default_manager.all(),
    )
    name = f"{resource.model.__name__}SelectionSerializer"
    return type(name, (serializers.Serializer,), {'ids': ids})


def validate_selection(resource, data):
    """
    Validate the selection of a bulk action.

    Returns:
        list: primary keys of the selected records

    Raises:
        rest_framework.exceptions.ValidationError
    """
    serializer = build_selection_serializer_class(resource)(data=data)
    serializer.is_valid(raise_exception=True)
    return [instance.pk for instance in serializer.validated_data.get('ids', [])]
