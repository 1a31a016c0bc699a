"""Canonical GraphQL query/mutation strings for the Shopify Admin API."""

# Products
QUERY_PRODUCTS = """
query getProducts($first: Int!) {
  products(first: $first) {
    edges {
      node {
        id
        title
        descriptionHtml
        vendor
        productType
        createdAt
        handle
        updatedAt
        publishedAt
        status
        tags
        variants(first: 20) {
          edges {
            node {
              id
              title
              price
              position
              inventoryPolicy
              compareAtPrice
              sku
              barcode
              createdAt
              updatedAt
              taxable
              inventoryItem { id tracked }
            }
          }
        }
        options { id name values }
        images(first: 10) {
          edges { node { id src: url altText } }
        }
        featuredImage { id src: url altText }
      }
    }
  }
}
"""

MUTATION_PRODUCT_CREATE = """
mutation productCreate($input: ProductInput!) {
  productCreate(input: $input) {
    product {
      id
      title
      status
      handle
      options {
        id
        name
        position
        optionValues { id name hasVariants }
      }
      variants(first: 1) {
        nodes { id }
      }
    }
    userErrors { field message }
  }
}
"""

MUTATION_PRODUCT_UPDATE = """
mutation productUpdate($input: ProductInput!) {
  productUpdate(input: $input) {
    product {
      id
      title
      descriptionHtml
      vendor
      productType
      tags
      status
      options {
        id
        name
        optionValues { id name }
      }
    }
    userErrors { field message }
  }
}
"""

MUTATION_PRODUCT_DELETE = """
mutation productDelete($input: ProductDeleteInput!) {
  productDelete(input: $input) {
    deletedProductId
    userErrors { field message }
  }
}
"""

MUTATION_PRODUCT_CREATE_MEDIA = """
mutation productCreateMedia($media: [CreateMediaInput!]!, $productId: ID!) {
  productCreateMedia(media: $media, productId: $productId) {
    media {
      id
      alt
      mediaContentType
      status
    }
    mediaUserErrors { field message }
    product { id title }
  }
}
"""

MUTATION_VARIANTS_BULK_CREATE = """
mutation ProductVariantsCreate($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
  productVariantsBulkCreate(productId: $productId, variants: $variants) {
    productVariants {
      id
      title
      inventoryItem { id sku }
      selectedOptions { name value }
    }
    userErrors { field message }
  }
}
"""

MUTATION_VARIANTS_BULK_DELETE = """
mutation bulkDeleteProductVariants($productId: ID!, $variantsIds: [ID!]!) {
  productVariantsBulkDelete(productId: $productId, variantsIds: $variantsIds) {
    product { id title }
    userErrors { field message }
  }
}
"""

# Orders
QUERY_ORDER = """
query getOrder($id: ID!) {
  order(id: $id) {
    id
    name
    note
    email
    createdAt
    updatedAt
    cancelledAt
    cancelReason
    displayFinancialStatus
    displayFulfillmentStatus
    tags
    lineItems(first: 50) {
      edges { node { id title quantity sku variant { id } } }
    }
  }
}
"""

MUTATION_ORDER_UPDATE = """
mutation UpdateOrderNote($input: OrderInput!) {
  orderUpdate(input: $input) {
    order { id name note }
    userErrors { field message }
  }
}
"""

MUTATION_TIMELINE_COMMENT_CREATE = """
mutation AddTimelineComment($input: TimelineCommentCreateInput!) {
  timelineCommentCreate(input: $input) {
    timelineComment { id message createdAt }
    userErrors { field message }
  }
}
"""

MUTATION_ORDER_CANCEL = """
mutation OrderCancel(
  $orderId: ID!,
  $reason: OrderCancelReason!,
  $refund: Boolean!,
  $restock: Boolean!,
  $notifyCustomer: Boolean,
  $staffNote: String
) {
  orderCancel(
    orderId: $orderId,
    reason: $reason,
    refund: $refund,
    restock: $restock,
    notifyCustomer: $notifyCustomer,
    staffNote: $staffNote
  ) {
    job { id done }
    orderCancelUserErrors { field message code }
  }
}
"""

QUERY_FULFILLMENT_ORDERS = """
query FulfillmentOrders($id: ID!) {
  order(id: $id) {
    id
    fulfillmentOrders(first: 10) {
      nodes {
        id
        status
        assignedLocation {
          location { id name }
        }
      }
    }
  }
}
"""

MUTATION_FULFILLMENT_CREATE = """
mutation FulfillmentCreate($fulfillment: FulfillmentInput!) {
  fulfillmentCreate(fulfillment: $fulfillment) {
    fulfillment { id status }
    userErrors { field message }
  }
}
"""

# Metafields
MUTATION_METAFIELDS_SET = """
mutation metafieldsSet($metafields: [MetafieldsSetInput!]!) {
  metafieldsSet(metafields: $metafields) {
    metafields {
      id
      namespace
      key
      value
      type
    }
    userErrors { field message }
  }
}
"""
