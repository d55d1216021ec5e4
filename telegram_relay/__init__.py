"""Pacote do relay de webhooks do Railway -> Telegram.

Este pacote contém:
- constants: valores padrão e mapa de status -> emoji
- config: leitura das variáveis de ambiente (Settings)
- utils: helpers de acesso a campos opcionais e formatação de hora
- detection: detecção do tipo de evento e emoji do status
- formatters: montagem da mensagem HTML e do link do projeto
- services: integração com a Bot API do Telegram
- controller: criação do Flask app e endpoints
"""
