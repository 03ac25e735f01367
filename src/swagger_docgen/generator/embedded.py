"""Embedded runtime docs module emitter.

Writes ``docs/docs.go``: a beego package that carries the resource
listing and every API declaration as JSON string constants and
registers them with ``beego.GlobalDocApi`` at init time.
"""

import json
import re
from pathlib import Path

from swagger_docgen.generator.output import JSON_INDENT, to_json, to_jsonable, write_file
from swagger_docgen.generator.paths import translate_path
from swagger_docgen.parser.base import ApiModel

DOCS_FILE = Path("docs") / "docs.go"
PLACEHOLDER_RE = re.compile(r"\{\{(resourceListing|apiDescriptions)\}\}")

GENERATED_FILE_TEMPLATE = '''// Code generated by swagger-docgen. DO NOT EDIT.

package docs

import (
	"encoding/json"
	"strings"

	"github.com/astaxie/beego"
	"github.com/astaxie/beego/context"
	"github.com/astaxie/beego/swagger"
)

const (
	Rootinfo string = {{resourceListing}}
	Subapi   string = {{apiDescriptions}}
)

var BasePath string

var rootapi swagger.ResourceListing
var apilist map[string]*swagger.ApiDeclaration

func init() {
	version := beego.AppConfig.DefaultString("version", "2.0")
	BasePath = "/" + version
	if beego.EnableDocs {
		err := json.Unmarshal([]byte(Rootinfo), &rootapi)
		if err != nil {
			beego.Error(err)
		}
		err = json.Unmarshal([]byte(Subapi), &apilist)
		if err != nil {
			beego.Error(err)
		}
		beego.GlobalDocApi["Root"] = rootapi
		beego.Trace("Load Docs: version", rootapi.ApiVersion)
		for k, v := range apilist {
			for i, a := range v.Apis {
				a.Path = urlReplace(a.Path)
				v.Apis[i] = a
			}
			v.BasePath = BasePath
			beego.GlobalDocApi[strings.Trim(k, "/")] = v
		}
	}
}

// SetupRouter mounts the raw JSON documents under /rawdoc.
func SetupRouter(ns *beego.Namespace) {
	docns := beego.NewNamespace("/rawdoc")
	docns.Get("/", func(ctx *context.Context) {
		ctx.Output.Json(rootapi, false, false)
	})
	for k, v := range apilist {
		vv := v
		docns.Get("/"+strings.Trim(k, "/"), func(ctx *context.Context) {
			ctx.Output.Json(vv, false, false)
		})
	}
	ns.Namespace(docns)
}

func urlReplace(src string) string {
	pt := strings.Split(src, "/")
	for i, p := range pt {
		if len(p) > 0 {
			if p[0] == ':' {
				pt[i] = "{" + p[1:] + "}"
			} else if len(p) > 1 && p[0] == '?' && p[1] == ':' {
				pt[i] = "{" + p[2:] + "}"
			}
		}
	}
	return strings.Join(pt, "/")
}
'''


def go_string_literal(text: str) -> str:
    """Quote text as a Go interpreted string literal.

    JSON string escapes (``\\"``, ``\\\\``, ``\\n``, ``\\uXXXX``...) are all valid
    Go escapes; non-ASCII is left unescaped since Go sources are UTF-8.
    """
    return json.dumps(text, ensure_ascii=False)


def render_docs_module(model: ApiModel) -> str:
    """Render the Go docs module, translating every route path in place first."""
    for declaration in model.top_level_apis.values():
        for entry in declaration.apis:
            entry.path = translate_path(entry.path)

    resource_listing = to_json(model.resource_listing, "the resource listing")
    api_descriptions = json.dumps(
        {
            key: to_jsonable(model.top_level_apis[key], f"the {key!r} API declaration")
            for key in sorted(model.top_level_apis)
        },
        indent=JSON_INDENT,
        ensure_ascii=False,
    )

    values = {
        "resourceListing": go_string_literal(resource_listing),
        "apiDescriptions": go_string_literal(api_descriptions),
    }
    return PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], GENERATED_FILE_TEMPLATE)


def generate_swagger_docs(model: ApiModel, output: Path) -> Path:
    """Write ``<output>/docs/docs.go`` and return its path."""
    file_path = output / DOCS_FILE
    write_file(file_path, render_docs_module(model))
    return file_path
