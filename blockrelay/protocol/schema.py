"""
zera_validator block schema.

A local stand-in for the validator's protobuf package, declaring only the
block fields listed below. It is not wire compatible with the upstream
go-zera-network definitions: field names and numbers are this project's own.
Replace this module with modules generated from the upstream .proto files
to relay real network blocks.

Decoding is strict. A payload carrying a field not declared here fails to
parse instead of being relayed with that field dropped.

The file descriptor is registered in the default descriptor pool the same way
generated _pb2 modules register theirs.
"""

import grpc
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf import empty_pb2, timestamp_pb2

PACKAGE = "zera_validator"
SERVICE_NAME = f"{PACKAGE}.ValidatorService"
BROADCAST_METHOD = f"/{SERVICE_NAME}/Broadcast"

_FIELD = descriptor_pb2.FieldDescriptorProto


def _field(name: str, number: int, kind: int, type_name: str = "", repeated: bool = False):
    field = _FIELD(
        name=name,
        number=number,
        type=kind,
        label=_FIELD.LABEL_REPEATED if repeated else _FIELD.LABEL_OPTIONAL,
    )
    # scalar fields must leave type_name unset
    if type_name:
        field.type_name = type_name
    return field


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="zera_validator/block.proto",
        package=PACKAGE,
        syntax="proto3",
        dependency=[empty_pb2.DESCRIPTOR.name, timestamp_pb2.DESCRIPTOR.name],
    )
    
    file_proto.message_type.add(name="BlockHeader", field=[
        _field("version", 1, _FIELD.TYPE_UINT32),
        _field("block_height", 2, _FIELD.TYPE_UINT64),
        _field("previous_block_hash", 3, _FIELD.TYPE_BYTES),
        _field("hash", 4, _FIELD.TYPE_BYTES),
        _field("timestamp", 5, _FIELD.TYPE_MESSAGE, ".google.protobuf.Timestamp"),
        _field("fee_address", 6, _FIELD.TYPE_BYTES),
        _field("nonce", 7, _FIELD.TYPE_UINT64),
    ])
    file_proto.message_type.add(name="Transaction", field=[
        _field("txn_hash", 1, _FIELD.TYPE_BYTES),
        _field("txn_type", 2, _FIELD.TYPE_UINT32),
        _field("payload", 3, _FIELD.TYPE_BYTES),
    ])
    file_proto.message_type.add(name="Block", field=[
        _field("block_header", 1, _FIELD.TYPE_MESSAGE, f".{PACKAGE}.BlockHeader"),
        _field("transactions", 2, _FIELD.TYPE_MESSAGE, f".{PACKAGE}.Transaction", repeated=True),
        _field("signature", 3, _FIELD.TYPE_BYTES),
        _field("public_key", 4, _FIELD.TYPE_BYTES),
    ])
    
    service = file_proto.service.add(name="ValidatorService")
    service.method.add(
        name="Broadcast",
        input_type=f".{PACKAGE}.Block",
        output_type=".google.protobuf.Empty",
    )
    return file_proto


DESCRIPTOR = descriptor_pool.Default().AddSerializedFile(_build_file().SerializeToString())

BlockHeader = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["BlockHeader"])
Transaction = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["Transaction"])
Block = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["Block"])
Empty = empty_pb2.Empty


def block_height_of(block) -> int:
    """Height carried in the block header."""
    return block.block_header.block_height


def add_validator_service_to_server(servicer, server) -> None:
    """
    Register a ValidatorService implementation on a grpc.aio server.
    
    The servicer must provide an async Broadcast(request, context) method.
    """
    handlers = {
        "Broadcast": grpc.unary_unary_rpc_method_handler(
            servicer.Broadcast,
            request_deserializer=Block.FromString,
            response_serializer=Empty.SerializeToString,
        ),
    }
    server.add_generic_rpc_handlers(
        (grpc.method_handlers_generic_handler(SERVICE_NAME, handlers),)
    )
