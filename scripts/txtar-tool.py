#! /usr/bin/python

from txtar.cli import txtar_tool

txtar_tool()
