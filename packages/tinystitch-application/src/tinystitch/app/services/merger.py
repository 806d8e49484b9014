import logging
from typing import Iterable, List, Optional

from tinystitch.spec import (
    EMPTY_CLASS,
    EMPTY_FIELD,
    EMPTY_METHOD,
    MissingDescriptorError,
    NamedEntry,
    TinyClass,
    TinyField,
    TinyFile,
    TinyLocalVariable,
    TinyMethod,
    TinyMethodParameter,
)
from tinystitch.app.types import MergeOptions
from .enclosing import match_enclosing_class_if_needed
from .headers import merge_headers
from .keys import key_union, method_key_union, union
from .namespaces import MergeContext, build_merge_context

log = logging.getLogger(__name__)


def merge_names(
    key: Optional[str],
    entry_a: Optional[NamedEntry],
    entry_b: Optional[NamedEntry],
    context: MergeContext,
) -> List[str]:
    """
    Picks one name per output namespace.

    Priority: the shared key for the shared namespace, then A's name, then
    B's name. Whatever is still unnamed becomes the key, or an empty hole
    when holes were requested or there is no key (parameters and locals).
    """
    merged = []
    for namespace in context.namespaces:
        if key is not None and namespace == context.common_namespace:
            merged.append(key)
            continue

        name = ""
        index_a = context.namespace_map_a[namespace]
        if entry_a is not None and index_a is not None:
            name = entry_a.get_name(index_a)
        if not name:
            index_b = context.namespace_map_b[namespace]
            if entry_b is not None and index_b is not None:
                name = entry_b.get_name(index_b)
        if not name:
            name = "" if context.leave_holes or key is None else key

        merged.append(name)
    return merged


def merge_comments(comments_a: Iterable[str], comments_b: Iterable[str]) -> List[str]:
    return union(comments_a, comments_b)


class MappingMerger:
    """
    Merges two tiny trees that share one namespace into a tree holding the
    namespaces of both.
    """

    def merge(
        self, file_a: TinyFile, file_b: TinyFile, options: MergeOptions = MergeOptions()
    ) -> TinyFile:
        context = build_merge_context(file_a.header, file_b.header, options)
        log.debug(
            f"Merging on '{context.common_namespace}' into {list(context.namespaces)}"
        )

        classes_a = file_a.map_classes_by_namespace(context.common_index_a)
        classes_b = file_b.map_classes_by_namespace(context.common_index_b)
        count_a = len(file_a.namespaces)
        count_b = len(file_b.namespaces)

        merged_classes = []
        for key in key_union(file_a.classes, file_b.classes, context):
            class_a = match_enclosing_class_if_needed(
                key, classes_a.get(key), classes_a, context.common_index_a, count_a
            )
            class_b = match_enclosing_class_if_needed(
                key, classes_b.get(key), classes_b, context.common_index_b, count_b
            )
            merged_classes.append(self.merge_class(key, class_a, class_b, context))

        header = merge_headers(file_a.header, file_b.header, context.namespaces)
        return TinyFile(header=header, classes=merged_classes)

    def merge_class(
        self,
        key: str,
        class_a: Optional[TinyClass],
        class_b: Optional[TinyClass],
        context: MergeContext,
    ) -> TinyClass:
        names = merge_names(key, class_a, class_b, context)
        class_a = class_a or EMPTY_CLASS
        class_b = class_b or EMPTY_CLASS

        methods_a = class_a.map_methods_by_namespace_and_descriptor(
            context.common_index_a
        )
        methods_b = class_b.map_methods_by_namespace_and_descriptor(
            context.common_index_b
        )
        methods = [
            self.merge_method(k[0], methods_a.get(k), methods_b.get(k), context)
            for k in method_key_union(class_a.methods, class_b.methods, context)
        ]

        fields_a = class_a.map_fields_by_namespace(context.common_index_a)
        fields_b = class_b.map_fields_by_namespace(context.common_index_b)
        fields = [
            self.merge_field(k, fields_a.get(k), fields_b.get(k), context)
            for k in key_union(class_a.fields, class_b.fields, context)
        ]

        return TinyClass(
            names=names,
            methods=methods,
            fields=fields,
            comments=merge_comments(class_a.comments, class_b.comments),
        )

    def merge_method(
        self,
        key: str,
        method_a: Optional[TinyMethod],
        method_b: Optional[TinyMethod],
        context: MergeContext,
    ) -> TinyMethod:
        names = merge_names(key, method_a, method_b, context)
        method_a = method_a or EMPTY_METHOD
        method_b = method_b or EMPTY_METHOD

        descriptor = (
            method_a.descriptor
            if method_a.descriptor is not None
            else method_b.descriptor
        )
        if descriptor is None:
            raise MissingDescriptorError(key)

        params_a = method_a.map_parameters_by_lv_index()
        params_b = method_b.map_parameters_by_lv_index()
        parameters = [
            self.merge_parameter(i, params_a.get(i), params_b.get(i), context)
            for i in union(params_a, params_b)
        ]

        locals_a = method_a.map_local_variables_by_lv_index()
        locals_b = method_b.map_local_variables_by_lv_index()
        local_variables = [
            self.merge_local_variable(i, locals_a.get(i), locals_b.get(i), context)
            for i in union(locals_a, locals_b)
        ]

        return TinyMethod(
            descriptor=descriptor,
            names=names,
            parameters=parameters,
            local_variables=local_variables,
            comments=merge_comments(method_a.comments, method_b.comments),
        )

    def merge_field(
        self,
        key: str,
        field_a: Optional[TinyField],
        field_b: Optional[TinyField],
        context: MergeContext,
    ) -> TinyField:
        names = merge_names(key, field_a, field_b, context)
        field_a = field_a or EMPTY_FIELD
        field_b = field_b or EMPTY_FIELD

        descriptor = (
            field_a.descriptor if field_a.descriptor is not None else field_b.descriptor
        )
        if descriptor is None:
            raise MissingDescriptorError(key)

        return TinyField(
            descriptor=descriptor,
            names=names,
            comments=merge_comments(field_a.comments, field_b.comments),
        )

    def merge_parameter(
        self,
        lv_index: int,
        param_a: Optional[TinyMethodParameter],
        param_b: Optional[TinyMethodParameter],
        context: MergeContext,
    ) -> TinyMethodParameter:
        return TinyMethodParameter(
            lv_index=lv_index,
            names=merge_names(None, param_a, param_b, context),
            comments=merge_comments(
                param_a.comments if param_a else [],
                param_b.comments if param_b else [],
            ),
        )

    def merge_local_variable(
        self,
        lv_index: int,
        local_a: Optional[TinyLocalVariable],
        local_b: Optional[TinyLocalVariable],
        context: MergeContext,
    ) -> TinyLocalVariable:
        source = local_a or local_b
        if source is None:
            raise ValueError(f"Local variable {lv_index} is missing on both sides")
        if local_a and local_b and (
            (local_a.lv_start_offset, local_a.lv_table_index)
            != (local_b.lv_start_offset, local_b.lv_table_index)
        ):
            log.warning(
                f"Local variable {lv_index} disagrees between inputs "
                f"(A: {local_a.lv_start_offset}/{local_a.lv_table_index}, "
                f"B: {local_b.lv_start_offset}/{local_b.lv_table_index}); keeping A"
            )

        return TinyLocalVariable(
            lv_index=lv_index,
            lv_start_offset=source.lv_start_offset,
            lv_table_index=source.lv_table_index,
            names=merge_names(None, local_a, local_b, context),
            comments=merge_comments(
                local_a.comments if local_a else [],
                local_b.comments if local_b else [],
            ),
        )
