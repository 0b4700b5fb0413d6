from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Optional, List, Union, Iterable, Dict, Any

from .manager import Manager
from ..models import (
    Product,
    ProductWithChildren,
    ProductTag,
    ShippingClass,
    ProductReview,
    ProductVariation,
    BatchRequest,
    BatchResponse,
)
from ..constants import (
    ModelMethod,
    GET_METHOD,
    POST_METHOD,
    PUT_METHOD,
    DELETE_METHOD,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    Context,
    SortOrder,
    SortOrderBy,
    FilterStatus,
    ProductType,
    StockStatus,
    ProductFilterWithType,
    TagSort,
    ReviewStatus,
    ReviewSort,
)
from ..decorators import validate_method_for_model
from ..utils import build_query

if TYPE_CHECKING:
    from ..clients import Client


class ProductManager(Manager):

    """:class:`ProductManager` class for the ``products`` endpoint"""

    def __init__(self, client: Client):
        """Initialize a :class:`ProductManager` object

        :param client: an initialized :class:`~.Client` object
        """
        super().__init__(
            endpoint='products',
            client=client,
            model=Product
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, after: Optional[datetime] = None,
                       before: Optional[datetime] = None, modified_after: Optional[datetime] = None,
                       modified_before: Optional[datetime] = None, dates_are_gmt: Optional[bool] = None,
                       exclude: Optional[List[int]] = None, include: Optional[List[int]] = None,
                       offset: Optional[int] = None, order: SortOrder = SortOrder.DESC,
                       orderby: SortOrderBy = SortOrderBy.DATE, parent: Optional[List[int]] = None,
                       parent_exclude: Optional[List[int]] = None, slug: Optional[str] = None,
                       status: FilterStatus = FilterStatus.ANY, type: Optional[ProductType] = None,
                       sku: Optional[str] = None, featured: Optional[bool] = None, category: Optional[str] = None,
                       tag: Optional[str] = None, shipping_class: Optional[str] = None,
                       attribute: Optional[str] = None, attribute_term: Optional[str] = None,
                       tax_class: Optional[str] = None, on_sale: Optional[bool] = None,
                       min_price: Optional[str] = None, max_price: Optional[str] = None,
                       stock_status: Optional[StockStatus] = None) -> Dict[str, Any]:
        """Query parameters of :meth:`list`; arguments that are ``None`` are left out"""
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'after': after,
            'before': before,
            'modified_after': modified_after,
            'modified_before': modified_before,
            'dates_are_gmt': dates_are_gmt,
            'exclude': exclude,
            'include': include,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'parent': parent,
            'parent_exclude': parent_exclude,
            'slug': slug,
            'status': status,
            'type': type,
            'sku': sku,
            'featured': featured,
            'category': category,
            'tag': tag,
            'shipping_class': shipping_class,
            'attribute': attribute,
            'attribute_term': attribute_term,
            'tax_class': tax_class,
            'on_sale': on_sale,
            'min_price': min_price,
            'max_price': max_price,
            'stock_status': stock_status,
        })

    def delete(self, item_id: int, force: bool = False, use_faker: Optional[bool] = None) -> Product:
        """Delete a product; moved to the trash unless ``force`` is ``True``

        :returns: the deleted product
        """
        return super().delete(item_id, force=force, use_faker=use_faker)

    @validate_method_for_model(ModelMethod.CREATE)
    def duplicate(self, product_id: int, use_faker: Optional[bool] = None) -> Product:
        """Create a copy of a product; returns the new product

        :param product_id: the id of the product to copy
        """
        self.logger.info(f'Duplicating product {product_id}')
        return self.execute(
            POST_METHOD, self.path(product_id, 'duplicate'),
            use_faker=use_faker,
            fake=Product.fake,
        )

    def with_children(self, product: Product, types: Iterable[ProductFilterWithType] = (
            ProductFilterWithType.RELATED_IDS,
            ProductFilterWithType.UPSELL_IDS,
            ProductFilterWithType.CROSS_SELL_IDS,
            ProductFilterWithType.PARENT_ID,
            ProductFilterWithType.GROUPED_PRODUCTS,
    ), use_faker: Optional[bool] = None) -> ProductWithChildren:
        """Retrieve the products referenced by the id lists of ``product`` with ``include=`` requests of up to 100 ids

        .. admonition:: Example
           :class: example

           ::

            >>> product = api.products.by_id(794)
            >>> children = api.products.with_children(product, [ProductFilterWithType.UPSELL_IDS])
            >>> children.upsells
            [<WooCommerce Product: 795>, <WooCommerce Product: 801>]

        :param product: the product whose related products to fetch
        :param types: the id lists of ``product`` to follow
        :returns: ``product`` plus its related, upsell, cross-sell, parent and grouped products
        :raises RequiredFieldError: if the id of ``product`` is not set
        """
        if self.use_fake_data(use_faker):
            return ProductWithChildren.fake(product)

        product.require('id')
        ids = [product.id]
        for kind in types:
            value = getattr(product, ProductFilterWithType(kind).value, None)
            if isinstance(value, list):
                ids.extend(value)
            elif value:
                ids.append(value)

        include = list(dict.fromkeys(i for i in ids if i is not None))
        products = []
        for start in range(0, len(include), MAX_PER_PAGE):
            chunk = include[start:start + MAX_PER_PAGE]
            products.extend(self.list(include=chunk, per_page=len(chunk), use_faker=False))
        return ProductWithChildren.from_products(product, products)


class ProductVariationManager(Manager):

    """:class:`ProductVariationManager` class for the ``products/{product_id}/variations`` endpoint

    Every operation takes the id of the parent product first.
    """

    def __init__(self, client: Client):
        super().__init__(
            endpoint='products',
            client=client,
            model=ProductVariation
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, after: Optional[datetime] = None,
                       before: Optional[datetime] = None, exclude: Optional[List[int]] = None,
                       include: Optional[List[int]] = None, offset: Optional[int] = None,
                       order: SortOrder = SortOrder.DESC, orderby: SortOrderBy = SortOrderBy.DATE,
                       parent: Optional[List[int]] = None, parent_exclude: Optional[List[int]] = None,
                       slug: Optional[str] = None, status: FilterStatus = FilterStatus.ANY,
                       sku: Optional[str] = None, tax_class: Optional[str] = None, on_sale: Optional[bool] = None,
                       min_price: Optional[str] = None, max_price: Optional[str] = None,
                       stock_status: Optional[StockStatus] = None) -> Dict[str, Any]:
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'after': after,
            'before': before,
            'exclude': exclude,
            'include': include,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'parent': parent,
            'parent_exclude': parent_exclude,
            'slug': slug,
            'status': status,
            'sku': sku,
            'tax_class': tax_class,
            'on_sale': on_sale,
            'min_price': min_price,
            'max_price': max_price,
            'stock_status': stock_status,
        })

    def variations_path(self, product_id: int, *segments: Union[str, int]) -> str:
        return self.path(product_id, 'variations', *segments)

    def list(self, product_id: int, use_faker: Optional[bool] = None, **params) -> List[ProductVariation]:
        """Retrieve a page of the variations of a product"""
        query = self.resolve_params(**params)
        return self.execute(
            GET_METHOD, self.variations_path(product_id),
            params=query,
            many=True,
            use_faker=use_faker,
            fake=lambda: self.fake_list(query['per_page']),
        )

    def by_id(self, product_id: int, variation_id: int, use_faker: Optional[bool] = None) -> ProductVariation:
        return self.execute(
            GET_METHOD, self.variations_path(product_id, variation_id),
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(variation_id),
        )

    @validate_method_for_model(ModelMethod.CREATE)
    def create(self, product_id: int, variation: ProductVariation,
               use_faker: Optional[bool] = None) -> ProductVariation:
        self.logger.info(f'Creating variation of product {product_id}')
        return self.execute(
            POST_METHOD, self.variations_path(product_id),
            payload=variation.payload(),
            use_faker=use_faker,
            fake=lambda: self.fake_saved(variation),
        )

    @validate_method_for_model(ModelMethod.UPDATE)
    def update(self, product_id: int, variation: ProductVariation,
               use_faker: Optional[bool] = None) -> ProductVariation:
        variation.require('id')
        self.logger.info(f'Updating {variation} of product {product_id}')
        return self.execute(
            PUT_METHOD, self.variations_path(product_id, variation.id),
            payload=variation.payload(),
            use_faker=use_faker,
            fake=lambda: self.fake_saved(variation),
        )

    @validate_method_for_model(ModelMethod.DELETE)
    def delete(self, product_id: int, variation_id: int, force: bool = False,
               use_faker: Optional[bool] = None) -> ProductVariation:
        """Delete a variation; returns the deleted variation"""
        self.logger.info(f'Deleting variation {variation_id} of product {product_id}')
        return self.execute(
            DELETE_METHOD, self.variations_path(product_id, variation_id),
            params=build_query({'force': force}),
            use_faker=use_faker,
            fake=lambda: self.fake_with_uid(variation_id),
        )

    def batch(self, product_id: int, request: BatchRequest,
              use_faker: Optional[bool] = None) -> BatchResponse[ProductVariation]:
        self.logger.info(f'Sending {request} for variations of product {product_id}')
        return self.execute(
            POST_METHOD, self.variations_path(product_id, 'batch'),
            payload=request.encode(),
            use_faker=use_faker,
            fake=lambda: BatchResponse.fake(request, ProductVariation),
            parse=lambda data: BatchResponse.decode(data, ProductVariation),
        )


class ProductTagManager(Manager):

    """:class:`ProductTagManager` class for the ``products/tags`` endpoint"""

    def __init__(self, client: Client):
        super().__init__(
            endpoint='products/tags',
            client=client,
            model=ProductTag
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, exclude: Optional[List[int]] = None,
                       include: Optional[List[int]] = None, offset: Optional[int] = None,
                       order: SortOrder = SortOrder.ASC, orderby: TagSort = TagSort.NAME,
                       hide_empty: bool = False, product: Optional[int] = None,
                       slug: Optional[str] = None) -> Dict[str, Any]:
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'exclude': exclude,
            'include': include,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'hide_empty': hide_empty,
            'product': product,
            'slug': slug,
        })

    def delete(self, item_id: int, force: bool = True, use_faker: Optional[bool] = None) -> ProductTag:
        """Delete a tag; tags don't support the trash, so ``force`` must be ``True``"""
        return super().delete(item_id, force=force, use_faker=use_faker)


class ShippingClassManager(Manager):

    """:class:`ShippingClassManager` class for the ``products/shipping_classes`` endpoint"""

    def __init__(self, client: Client):
        super().__init__(
            endpoint='products/shipping_classes',
            client=client,
            model=ShippingClass
        )

    resolve_params = staticmethod(ProductTagManager.resolve_params)

    def delete(self, item_id: int, force: bool = True, use_faker: Optional[bool] = None) -> ShippingClass:
        return super().delete(item_id, force=force, use_faker=use_faker)


class ProductReviewManager(Manager):

    """:class:`ProductReviewManager` class for the ``products/reviews`` endpoint"""

    def __init__(self, client: Client):
        super().__init__(
            endpoint='products/reviews',
            client=client,
            model=ProductReview
        )

    @staticmethod
    def resolve_params(context: Context = Context.VIEW, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE,
                       search: Optional[str] = None, after: Optional[datetime] = None,
                       before: Optional[datetime] = None, exclude: Optional[List[int]] = None,
                       include: Optional[List[int]] = None, offset: Optional[int] = None,
                       order: SortOrder = SortOrder.DESC, orderby: ReviewSort = ReviewSort.DATE_GMT,
                       reviewer: Optional[List[int]] = None, reviewer_exclude: Optional[List[int]] = None,
                       reviewer_email: Optional[List[str]] = None, product: Optional[List[int]] = None,
                       status: ReviewStatus = ReviewStatus.APPROVED) -> Dict[str, Any]:
        return build_query({
            'context': context,
            'page': page,
            'per_page': per_page,
            'search': search,
            'after': after,
            'before': before,
            'exclude': exclude,
            'include': include,
            'offset': offset,
            'order': order,
            'orderby': orderby,
            'reviewer': reviewer,
            'reviewer_exclude': reviewer_exclude,
            'reviewer_email': reviewer_email,
            'product': product,
            'status': status,
        })

    def delete(self, item_id: int, force: bool = True, use_faker: Optional[bool] = None) -> ProductReview:
        return super().delete(item_id, force=force, use_faker=use_faker)
