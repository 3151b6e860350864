import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    """Exact-match category filter.  An empty value leaves the queryset as is."""

    category = django_filters.CharFilter(field_name="category", lookup_expr="exact")

    class Meta:
        model = Product
        fields = ["category"]
