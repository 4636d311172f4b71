from app.models.product import Product


def product_document(product: Product) -> dict:
    """Public JSON shape of a catalogue record."""
    return {
        "_id": product.object_id,
        "id": product.id,
        "title": product.title,
        "author": product.author,
        "genre": product.genre,
        "price": product.price,
        "image": product.image,
        "AvailableInventory": product.available_inventory,
        "description": product.description,
    }
