from django.contrib import admin

from simulacao.models import Banco, ParametroTaxa


class BancoAdmin(admin.ModelAdmin):
    list_display = (
        'codigo',
        'nome',
        'taxa_novo',
        'taxa_refin',
        'taxa_portabilidade',
        'ativo',
    )
    list_editable = ('taxa_novo', 'taxa_refin', 'taxa_portabilidade', 'ativo')
    list_filter = ('ativo',)
    search_fields = ('codigo', 'nome')


class ParametroTaxaAdmin(admin.ModelAdmin):
    list_display = ('chave', 'valor', 'updated_at')
    readonly_fields = ('created_at', 'updated_at')


admin.site.register(Banco, BancoAdmin)
admin.site.register(ParametroTaxa, ParametroTaxaAdmin)
