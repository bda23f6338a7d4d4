"""User-facing messages - the Spanish strings returned by the API.

Invariants:
    - Pure data, no formatting logic
    - Every string a client can see in a response body lives here
"""

# --- Validation ---------------------------------------------------------------

NAME_REQUIRED = "El nombre del producto es obligatorio"
PRICE_REQUIRED = "El precio del producto es obligatorio"
INVALID_VALUE = "Valor no válido"
INVALID_PRICE = "Precio no válido"
INVALID_AVAILABILITY = "Valor para disponibilidad no válido"
INVALID_ID = "ID no válido"

# --- Resources ----------------------------------------------------------------

PRODUCT_NOT_FOUND = "Producto no encontrado"
PRODUCT_DELETED = "Producto eliminado"

# --- Infrastructure -----------------------------------------------------------

INTERNAL_ERROR = "Error interno del servidor"
DATABASE_UNAVAILABLE = "Base de datos no disponible"
DB_CONNECTED = "Conexión exitosa a la DB"
DB_CONNECTION_FAILED = "Hubo un error al conectar a la DB"
