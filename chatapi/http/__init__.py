"""
HTTP subpackage - transport side of the client.

- client: BaseClient with the generic form call and response decoding
- upload: streaming multipart upload pipeline
- pipe: bounded async byte pipe feeding the request body
- multipart: incremental multipart/form-data encoder
"""

from chatapi.http.client import BaseClient
from chatapi.http.multipart import MultipartWriter
from chatapi.http.pipe import BodyPipe
from chatapi.http.upload import UploadPipeline

__all__ = [
    "BaseClient",
    "BodyPipe",
    "MultipartWriter",
    "UploadPipeline",
]
